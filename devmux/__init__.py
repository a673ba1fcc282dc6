"""Pick a project under ~/Developer and open it in a split tmux session."""
