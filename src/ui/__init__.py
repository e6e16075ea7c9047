"""Flask front-end for the squad page."""
