"""Create new swoft projects from cached upstream demo templates."""
