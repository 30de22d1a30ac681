"""Full-screen Textual interface."""
