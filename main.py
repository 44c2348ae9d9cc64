from shortlink_app.app import create_app

# Create FastAPI app; settings and the store are loaded at startup
# (`uvicorn main:app`). For the standalone server use shortlink_app.server.
app = create_app()
