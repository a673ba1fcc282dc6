PROJECTS_DIRNAME = "Developer"

TMUX_BIN = "tmux"

DEFAULT_SESSION_NAME = "default"
EMPTY_LISTING_PLACEHOLDER = "(no subdirectories)"
