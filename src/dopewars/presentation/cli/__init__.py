"""Console presentation: menus, rendering helpers and settings file."""
