from usermgr.main import main

raise SystemExit(main())
