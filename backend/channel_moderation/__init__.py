"""Channel moderation: capability resolution and action menus for forum content."""
