"""appalias 命令行."""
