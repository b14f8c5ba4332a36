"""
Settings read by mongomanager at import time must already include the
values load_dotenv() brings in from the .env file.
"""
import os
import subprocess
import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent

# stands in for a .env file holding MONGO_DB_NAME, then imports the app fresh
SCRIPT = """
import os
import dotenv

def fake_load_dotenv(*args, **kwargs):
    os.environ.setdefault("MONGO_DB_NAME", "FromDotenv")
    return True

dotenv.load_dotenv = fake_load_dotenv

import server
import mongomanager
print(mongomanager.db.name)
"""


def test_dotenv_values_reach_the_database_handle():
    env = {key: value for key, value in os.environ.items() if key != "MONGO_DB_NAME"}

    result = subprocess.run([sys.executable, "-c", SCRIPT], cwd=PROJECT_ROOT, env=env,
                            capture_output=True, text=True, timeout=60)

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip().splitlines()[-1] == "FromDotenv"
