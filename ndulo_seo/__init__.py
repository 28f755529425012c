"""Flask server that serves the portfolio SPA with per-route SEO tags."""
