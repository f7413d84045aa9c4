import argparse
import logging
import sys
from pathlib import Path

from fetcher import RepositoryFetcher
from .settings import GeneratorSettings
from .xml_parser_runner import XmlParserRunner
from .examples import find_example_files

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Clone Checkstyle and extract a module's configuration from its xdoc"
    )
    parser.add_argument("--repo-url", help="Checkstyle repository URL")
    parser.add_argument("--dest", dest="destination_dir",
                        help="Directory holding the Checkstyle clone")
    parser.add_argument("--xml-file", dest="xml_file_path", help="xdoc file to parse")
    parser.add_argument("--module", dest="module_name", help="Checkstyle module name")
    parser.add_argument("--jar", dest="jar_path", help="Path to XMLParsing.jar")
    parser.add_argument("--java", dest="java_executable", help="Java executable")
    parser.add_argument("--list-examples", metavar="DIR",
                        help="List Example#.java files under DIR inside the clone")
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

    settings = GeneratorSettings.from_env(
        repo_url=args.repo_url,
        destination_dir=args.destination_dir,
        xml_file_path=args.xml_file_path,
        module_name=args.module_name,
        jar_path=args.jar_path,
        java_executable=args.java_executable,
    )

    print("Cloning repository...")
    try:
        fetcher = RepositoryFetcher(check_remote=not args.skip_remote_check)
        fetch_result = fetcher.fetch(settings.repo_url, settings.destination_dir)
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.list_examples:
        examples_dir = Path(fetch_result.path) / args.list_examples
        example_files = find_example_files(examples_dir)
        print(f"Found {len(example_files)} Example#.java files in {examples_dir}")
        for example_file in example_files:
            print(f"  {example_file}")

    print("Running Java XML Parser...")
    runner = XmlParserRunner(jar_path=settings.jar_path, java_executable=settings.java_executable)
    result = runner.run(settings.xml_file_path, settings.module_name)

    print(f"Generated configuration for {settings.module_name}")

    if not result.success:
        logger.error(f"Configuration generation failed: {result.error}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
