"""
Issue a session token for a name without going through HTTP. Run from project root:
  python -m gatekeeper.scripts.sign_token NAME [--verify TOKEN]
Example:
  curl --cookie "auth=$(python -m gatekeeper.scripts.sign_token bob)" localhost:3000/api/profile
"""
import argparse
import sys

from gatekeeper.core.config import get_settings
from gatekeeper.core.security import SessionSigner, sign_session, verify_session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sign or verify a Gatekeeper session token.")
    parser.add_argument("name", nargs="?", help="Name claim to sign")
    parser.add_argument("--verify", metavar="TOKEN", help="Verify TOKEN and print its claims")
    args = parser.parse_args(argv)

    settings = get_settings()
    signer = SessionSigner(settings.JWT_SECRET.get_secret_value(), settings.JWT_ALGORITHM)

    if args.verify is not None:
        seed = verify_session(signer, args.verify)
        if seed is None:
            print("Invalid token.", file=sys.stderr)
            return 1
        print(seed)
        return 0

    name = (args.name or "").strip()
    if not name:
        print("A non-empty name is required.", file=sys.stderr)
        return 1
    print(sign_session(signer, {"name": name}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
