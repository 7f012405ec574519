"""
Queimadas - Vercel Serverless Entry Point
Exposes the FastAPI application: biomes, fire detections, viewports, maps
"""

import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from queimadas.api.main import app

# Vercel serverless handler
handler = app
