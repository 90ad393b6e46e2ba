"""HTTP/WebSocket host for rover missions."""
