"""API endpoint modules. Each defines a router included by app.api.router."""
