"""
Run Streamlit Dashboard
=======================

Script to start the churn prediction form.

Usage:
    python scripts/run_dashboard.py
    python scripts/run_dashboard.py --port 8501 --api-url http://localhost:8000
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config import get_config


def parse_args():
    """Parse command line arguments."""
    config = get_config()

    parser = argparse.ArgumentParser(description="Run the churn prediction form")

    parser.add_argument(
        "--port",
        type=int,
        default=config.get("dashboard", {}).get("port", 8501),
        help="Port to run on"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Prediction service address (overrides config.yaml)"
    )
    parser.add_argument(
        "--browser",
        action="store_true",
        help="Open browser automatically"
    )

    return parser.parse_args()


def main():
    """Run the dashboard."""
    args = parse_args()

    dashboard_path = project_root / "churn_form" / "dashboard" / "app.py"

    env = os.environ.copy()
    if args.api_url:
        env["CHURN_API_URL"] = args.api_url
    api_url = env.get("CHURN_API_URL") or get_config().get("api", {}).get("url")

    print(f"""
    ╔═══════════════════════════════════════════════════╗
    ║       Telco Churn Prediction Form                 ║
    ╠═══════════════════════════════════════════════════╣
    ║  URL: http://localhost:{args.port}                      ║
    ╠═══════════════════════════════════════════════════╣
    ║  NOTE: The prediction service must be reachable   ║
    ║        at {api_url}
    ╚═══════════════════════════════════════════════════╝
    """)

    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(dashboard_path),
        "--server.port", str(args.port),
        "--server.headless", str(not args.browser).lower(),
    ]

    subprocess.run(cmd, env=env)


if __name__ == "__main__":
    main()
