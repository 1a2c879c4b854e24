"""Per-user and per-organization task lists with a priority Kanban board."""
