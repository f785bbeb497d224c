"""
main.py

Flask backend for ShortDrop: upload a file, get a short link, delete it later.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, boto3, google-cloud-storage
  - Infrastructure: an S3-compatible bucket (or GCS, or a local directory)

Notes:
  - Configuration comes from environment variables (see shortdrop.config.settings)
  - API endpoints live under /api with Swagger docs at /api/docs
  - Short links are served at /<shortId>
"""

import logging
import os

from app_factory import create_app

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 8000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    app.run(host=host, port=port, debug=debug)
