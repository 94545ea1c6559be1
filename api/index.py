"""Vercel serverless entry point for stylegate."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from stylegate.config import StyleGateConfig
from stylegate.web.app import create_app

app = create_app(StyleGateConfig.from_env())
