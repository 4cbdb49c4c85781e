"""
Snippet extraction for the SOLID guide.

Pulls the source of named classes and functions out of the example modules
so the guide always shows the code that the tests actually exercise.
"""
import ast
import importlib.util
import logging
from pathlib import Path
from typing import Dict, List, Optional

from solidguide.errors import SnippetError
from solidguide.guide_models import SnippetRef


logger = logging.getLogger(__name__)


class SnippetExtractor:
    """Extracts top-level definitions from an example module's source."""

    def __init__(self, module_name: str):
        """
        Initialize the snippet extractor.

        Args:
            module_name: Dotted name of the example module
        """
        self.module_name = module_name
        self.source: Optional[str] = None
        self.tree: Optional[ast.Module] = None

    def locate(self) -> Path:
        """
        Find the source file of the module without importing it.

        Returns:
            Path to the module's source file

        Raises:
            SnippetError: If the module cannot be found
        """
        try:
            spec = importlib.util.find_spec(self.module_name)
        except (ImportError, ValueError) as e:
            raise SnippetError(f"Cannot locate module {self.module_name}: {e}") from e

        if spec is None or not spec.origin or not spec.origin.endswith('.py'):
            raise SnippetError(f"Module not found: {self.module_name}")

        return Path(spec.origin)

    def parse(self) -> ast.Module:
        """
        Read and parse the module source.

        Returns:
            AST of the module
        """
        path = self.locate()
        self.source = path.read_text(encoding='utf-8')
        self.tree = ast.parse(self.source, filename=str(path))
        logger.debug("Parsed %s from %s", self.module_name, path)
        return self.tree

    def list_objects(self) -> List[str]:
        """
        List the top-level class and function names of the module.

        Returns:
            Names in source order
        """
        return list(self._definitions().keys())

    def extract(self, objects: List[str]) -> str:
        """
        Build a snippet from the module's imports and the requested objects.

        Args:
            objects: Top-level names to include, in display order

        Returns:
            Snippet source code

        Raises:
            SnippetError: If an object is not defined in the module
        """
        definitions = self._definitions()

        missing = [name for name in objects if name not in definitions]
        if missing:
            raise SnippetError(
                f"{self.module_name} does not define: {', '.join(missing)}. "
                f"Available: {', '.join(definitions) or 'none'}"
            )

        blocks = [self._segment(definitions[name]) for name in objects]
        body = "\n\n\n".join(blocks)

        imports = self._imports()
        if imports:
            return "\n".join(imports) + "\n\n\n" + body
        return body

    def _definitions(self) -> Dict[str, ast.stmt]:
        """Map top-level class/function names to their nodes."""
        if self.tree is None:
            self.parse()

        return {
            node.name: node
            for node in self.tree.body
            if isinstance(node, (ast.ClassDef, ast.FunctionDef, ast.AsyncFunctionDef))
        }

    def _imports(self) -> List[str]:
        """Top-level import statements, excluding __future__ imports."""
        imports = []
        for node in self.tree.body:
            if isinstance(node, ast.ImportFrom) and node.module == '__future__':
                continue
            if isinstance(node, (ast.Import, ast.ImportFrom)):
                imports.append(self._segment(node))
        return imports

    def _segment(self, node: ast.stmt) -> str:
        """Source lines of a node, including its decorators."""
        lines = self.source.splitlines()
        decorators = getattr(node, 'decorator_list', [])
        start = min([d.lineno for d in decorators] + [node.lineno]) - 1
        return "\n".join(lines[start:node.end_lineno])


def extract_snippet(ref: SnippetRef) -> str:
    """
    Convenience function to extract the code of a snippet reference.

    Args:
        ref: Snippet reference from the guide content

    Returns:
        Snippet source code
    """
    return SnippetExtractor(ref.module).extract(ref.objects)
