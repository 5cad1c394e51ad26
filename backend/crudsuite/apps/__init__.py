"""One module per app, each exposing a module-level `app` for uvicorn."""
