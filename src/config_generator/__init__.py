from .settings import GeneratorSettings
from .xml_parser_runner import XmlParserRunner, ParserRunResult
from .examples import find_example_files

__all__ = ['GeneratorSettings', 'XmlParserRunner', 'ParserRunResult', 'find_example_files']
