#!/usr/bin/env python3
"""
Check whether an access token can administer the portfolio gist.

Runs the same ownership check and document read the admin login performs,
and prints what failed.

Usage:
    GIST_ID=<id> python -m scripts.diagnose_token <token>
"""

import asyncio
import sys


async def diagnose_token(token: str) -> bool:
    """Verify ownership and read the document with the given token"""
    from gistfolio.dependencies import get_document_store
    from gistfolio.domain.exceptions import GistfolioException

    store = get_document_store()

    print(f"\n{'='*60}")
    print(f"Gist: {store.gist_id}  File: {store.file_name}")
    print(f"{'='*60}\n")

    try:
        owner = await store.verify_permission(token)
    except GistfolioException as e:
        print(f"❌ Could not reach the API: {e.message}")
        return False

    if not owner:
        print("❌ Token is invalid, expired, or does not belong to the gist owner")
        return False
    print("✅ Token owns the gist")

    try:
        document = await store.fetch_document(token)
    except GistfolioException as e:
        print(f"❌ Failed to read document: {e.message}")
        for key, value in e.details.items():
            print(f"   {key}: {value}")
        return False

    featured = next((entry for entry in document.entries if entry.is_featured), None)
    print(f"✅ Document readable: {len(document.entries)} entries")
    print(f"   Featured: {featured.title if featured else 'none'}")
    print(f"   About: {'present' if document.about else 'missing'}")
    print(f"   Settings: {'present' if document.settings else 'defaults'}")
    print()
    print("   Note: write scope is only checked on save; a token without the")
    print("         'gist' scope passes this check but fails to persist.")
    return True


def main():
    """CLI entry point"""
    import argparse

    from gistfolio.shared.telemetry.logging import setup_logging

    parser = argparse.ArgumentParser(description="Diagnose a portfolio admin token")
    parser.add_argument("token", help="GitHub access token to check")

    args = parser.parse_args()
    setup_logging()

    ok = asyncio.run(diagnose_token(args.token))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
