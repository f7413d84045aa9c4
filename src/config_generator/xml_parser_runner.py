import sys
import logging
import subprocess
import threading
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ParserRunResult:
    """Outcome of a single XML parser invocation."""
    success: bool
    command: List[str] = field(default_factory=list)
    return_code: Optional[int] = None  # None when no exit status was collected
    error: Optional[str] = None


class XmlParserRunner:
    """
    Runs the external XMLParsing.jar against a Checkstyle xdoc file.

    The jar is an opaque collaborator: it receives the xdoc path and the
    module name as positional arguments and its output is forwarded line
    by line, byte for byte where the target stream exposes a buffer.
    """

    def __init__(self, jar_path="XMLParsing.jar", java_executable="java"):
        self.jar_path = jar_path
        self.java_executable = java_executable

    def build_command(self, xml_file_path, module_name):
        """Return the argv for parsing ``module_name`` out of ``xml_file_path``."""
        return [self.java_executable, "-jar", str(self.jar_path), str(xml_file_path), module_name]

    def run(self, xml_file_path, module_name, stdout=None, stderr=None):
        """
        Run the parser and forward its output line by line.

        Blocks until the child process exits. Any failure to start, drain or
        wait for the process is logged and reported through the result, never
        raised. A child left running after a failure is killed and reaped.

        Args:
            xml_file_path: Path to the xdoc file
            module_name: Checkstyle module to extract
            stdout: Stream receiving the child's stdout (default: sys.stdout)
            stderr: Stream receiving the child's stderr (default: sys.stderr)

        Returns:
            ParserRunResult
        """
        stdout = stdout if stdout is not None else sys.stdout
        stderr = stderr if stderr is not None else sys.stderr
        command = self.build_command(xml_file_path, module_name)

        logger.debug(f"Running: {' '.join(command)}")
        proc = None
        pump_errors = []
        try:
            # Pipes stay binary so line endings and undecodable bytes pass through
            proc = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
            # stderr is drained on its own thread so neither pipe can fill up
            err_pump = threading.Thread(
                target=self._drain, args=(proc.stderr, stderr, pump_errors), daemon=True
            )
            err_pump.start()
            self._forward_lines(proc.stdout, stdout)
            return_code = proc.wait()
            err_pump.join()
            if pump_errors:
                raise pump_errors[0]
        except Exception as e:
            logger.exception(f"Failed to run XML parser for {module_name}")
            return ParserRunResult(success=False, command=command, error=str(e))
        finally:
            if proc is not None and proc.poll() is None:
                proc.kill()
                proc.wait()

        if return_code != 0:
            logger.error(f"XML parser exited with status {return_code} for {module_name}")
            return ParserRunResult(
                success=False,
                command=command,
                return_code=return_code,
                error=f"XML parser exited with status {return_code}",
            )

        return ParserRunResult(success=True, command=command, return_code=return_code)

    @classmethod
    def _drain(cls, source, target, errors):
        """Forward ``source`` to ``target``; on failure record it and keep emptying the pipe."""
        try:
            cls._forward_lines(source, target)
        except Exception as e:
            errors.append(e)
            for _ in source:
                pass

    @staticmethod
    def _forward_lines(source, target):
        buffer = getattr(target, "buffer", None)
        if buffer is not None:
            # Keep anything already written through the text layer ahead of our bytes
            target.flush()
        for line in source:
            if buffer is not None:
                buffer.write(line)
                buffer.flush()
            else:
                target.write(line.decode("utf-8", errors="replace"))
                target.flush()
        source.close()
