"""Print a login token for an e‑mail, signed with the configured SECRET_KEY.

Handy for calling the product routes with curl without going through
``/api/auth/login``.  The token carries no expiry.

Usage:
    SECRET_KEY=... python create_token.py user@example.com
"""
import argparse

from inventory_api.app.core.config import settings
from inventory_api.app.core.security import create_access_token, login_claims


def main() -> None:
    ap = argparse.ArgumentParser(description="Mint an Inventory API bearer token.")
    ap.add_argument("email", help="E‑mail to put in the token audience")
    args = ap.parse_args()
    token = create_access_token(login_claims(args.email), settings.secret_key)
    print(token)


if __name__ == "__main__":
    main()
