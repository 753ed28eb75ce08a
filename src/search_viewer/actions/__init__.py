"""Action handlers extracted from the app: view rendering and session sync."""
