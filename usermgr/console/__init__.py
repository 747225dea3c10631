"""Interactive terminal front-end (menu loop and rendering)."""
