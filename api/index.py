"""
Vercel Serverless Function Entry Point for the root path
Answers GET /api (the rewrite target of /) with the fixed health payload
"""
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backend.health import root_app

# Vercel picks up the ASGI app
app = root_app
handler = app
