# tests/conftest.py

"""
Test configuration.

Settings are read at import time, so the required environment is
seeded before any app module is imported. No test talks to the network.
"""

import os

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("ANTHROPIC_API_KEY", "test-anthropic-key")
os.environ.setdefault("PERSIST_VERIFICATION_RUNS", "false")
os.environ.setdefault("ENABLE_AI_EXPLANATIONS", "false")
