import os
import sys
import subprocess
import signal
from typing import List

def uvicorn_cmd(port: int) -> List[str]:
    return [
        sys.executable, "-m", "uvicorn", "goodbuddi.main:app",
        "--host", os.getenv("HOST", "127.0.0.1"),
        "--port", str(port),
        "--log-level", os.getenv("LOG_LEVEL", "info").lower(),
    ]

def main():
    port_env = os.getenv("PORT", "").strip()
    port = int(port_env) if port_env.isdigit() else 8000

    proc = subprocess.Popen(uvicorn_cmd(port), env=os.environ.copy())

    def _shutdown(*_):
        if proc.poll() is None:
            proc.terminate()

    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)

    code = proc.wait()
    raise SystemExit(code)

if __name__ == "__main__":
    main()
