"""Full resynchronization of proxy documents."""
