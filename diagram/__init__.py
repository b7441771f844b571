"""Triangle diagram layout and SVG rendering."""
