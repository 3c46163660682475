"""muxtap CLI commands. Importing a module registers its command on the app."""
