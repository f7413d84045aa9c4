import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_REPO_URL = "https://github.com/checkstyle/checkstyle.git"
DEFAULT_DESTINATION_DIR = "checkstyle-repo"
DEFAULT_XDOC_RELATIVE_PATH = "src/xdocs/checks/annotation/annotationlocation.xml"
DEFAULT_MODULE_NAME = "AnnotationLocation"
DEFAULT_JAR_PATH = "XMLParsing.jar"
DEFAULT_JAVA_EXECUTABLE = "java"


@dataclass
class GeneratorSettings:
    """Parameters for one config generation run."""
    repo_url: str = DEFAULT_REPO_URL
    destination_dir: str = DEFAULT_DESTINATION_DIR
    xml_file_path: Optional[str] = None  # derived from destination_dir when unset
    module_name: str = DEFAULT_MODULE_NAME
    jar_path: str = DEFAULT_JAR_PATH
    java_executable: str = DEFAULT_JAVA_EXECUTABLE

    def __post_init__(self):
        if not self.xml_file_path:
            self.xml_file_path = f"{self.destination_dir}/{DEFAULT_XDOC_RELATIVE_PATH}"

    @classmethod
    def from_env(cls, dotenv_path=None, **overrides):
        """
        Build settings from environment variables (and a .env file, if present).

        Keyword overrides whose value is None are ignored, so parsed CLI
        arguments can be passed straight through.

        Args:
            dotenv_path: Optional explicit path to a .env file
            **overrides: Field values that take precedence over the environment

        Returns:
            GeneratorSettings
        """
        load_dotenv(dotenv_path=dotenv_path)

        values = {
            "repo_url": os.getenv("CHECKSTYLE_REPO_URL", DEFAULT_REPO_URL),
            "destination_dir": os.getenv("CHECKSTYLE_REPO_DIR", DEFAULT_DESTINATION_DIR),
            "xml_file_path": os.getenv("CHECKSTYLE_XML_FILE"),
            "module_name": os.getenv("CHECKSTYLE_MODULE", DEFAULT_MODULE_NAME),
            "jar_path": os.getenv("XML_PARSER_JAR", DEFAULT_JAR_PATH),
            "java_executable": os.getenv("JAVA_BIN", DEFAULT_JAVA_EXECUTABLE),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        return cls(**values)
