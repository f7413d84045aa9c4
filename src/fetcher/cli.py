import argparse
import logging
import sys
from .repository_fetcher import RepositoryFetcher

DEFAULT_REPO_URL = "https://github.com/checkstyle/checkstyle.git"
DEFAULT_DESTINATION = ".ci-temp/checkstyle"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Clone the Checkstyle repository if it is not present")
    parser.add_argument("--url", default=DEFAULT_REPO_URL, help="Repository URL to clone")
    parser.add_argument("--dest", default=DEFAULT_DESTINATION,
                        help="Directory to clone the repository into")
    parser.add_argument("--skip-remote-check", action="store_true",
                        help="Do not query the GitHub API before cloning")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    try:
        fetcher = RepositoryFetcher(check_remote=not args.skip_remote_check)
        result = fetcher.fetch(args.url, args.dest)
        print(f"Repository available at: {result.path}")
        return 0
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
