"""
Vercel Serverless Function Entry Point for FastAPI Backend
Every non-root request is rewritten here; the middleware restores the /api
prefix the backend routes expect
"""
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from backend.config import get_settings
from backend.main import app as backend_app
from backend.path_normalizer import MountPrefixMiddleware

# Built once per cold start, shared by every request
app = MountPrefixMiddleware(backend_app, prefix=get_settings().api_prefix)
handler = app
