"""
Principle violation detection for SOLID guide snippets.

This module inspects Python source with the ast module and flags the shapes
that the guide's "bad" snippets illustrate. The checks are heuristics sized
for short teaching examples, not a general-purpose linter.
"""
import ast
import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Set

from solidguide.errors import SnippetError
from solidguide.snippet_extractor import SnippetExtractor


logger = logging.getLogger(__name__)

# Method name prefixes grouped by the responsibility they signal.
RESPONSIBILITY_GROUPS = {
    'data access': ('get', 'fetch', 'load', 'find', 'save', 'store', 'query', 'delete'),
    'messaging': ('send', 'email', 'notify', 'mail'),
    'presentation': ('render', 'format', 'print', 'display'),
}


@dataclass
class PrincipleViolation:
    """Represents a principle violation found in source code."""
    principle: str  # "SRP", "OCP", "LSP", "ISP", "DIP"
    class_name: str
    method_name: str
    line_number: int
    message: str

    def __str__(self) -> str:
        """String representation."""
        target = f"{self.class_name}.{self.method_name}" if self.method_name else self.class_name
        return f"{self.principle} {target} at line {self.line_number}: {self.message}"

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary."""
        return {
            'principle': self.principle,
            'class_name': self.class_name,
            'method_name': self.method_name,
            'line_number': self.line_number,
            'message': self.message
        }


class ViolationDetector:
    """Detects SOLID principle violations in a piece of Python source."""

    def __init__(self, source: str, filename: str = "<snippet>"):
        """
        Initialize the detector.

        Args:
            source: Python source code
            filename: Name used in syntax error messages

        Raises:
            SyntaxError: If the source is not valid Python
        """
        self.filename = filename
        self.tree = ast.parse(source, filename=filename)
        self.classes: Dict[str, ast.ClassDef] = {
            node.name: node for node in ast.walk(self.tree) if isinstance(node, ast.ClassDef)
        }

    def detect(self) -> List[PrincipleViolation]:
        """
        Run every check over the source.

        Returns:
            Violations ordered by line number
        """
        violations = []
        for class_node in self.classes.values():
            violations.extend(self._check_single_responsibility(class_node))
            violations.extend(self._check_substitution(class_node))
            violations.extend(self._check_dependency_inversion(class_node))

        for node in ast.walk(self.tree):
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
                violations.extend(self._check_open_closed(node))

        violations.sort(key=lambda v: (v.line_number, v.principle))
        for violation in violations:
            logger.debug("%s: %s", self.filename, violation)
        return violations

    def principles_violated(self) -> Set[str]:
        """Acronyms of every principle the source violates."""
        return {violation.principle for violation in self.detect()}

    # ------------------------------------------------------------------
    # SRP
    # ------------------------------------------------------------------

    def _check_single_responsibility(self, class_node: ast.ClassDef) -> List[PrincipleViolation]:
        groups = {}
        for method in _methods(class_node):
            group = _responsibility_of(method.name)
            if group and group not in groups:
                groups[group] = method.name

        if len(groups) < 2:
            return []

        described = ", ".join(f"{group} ({name})" for group, name in groups.items())
        return [PrincipleViolation(
            principle='SRP',
            class_name=class_node.name,
            method_name="",
            line_number=class_node.lineno,
            message=f"Class mixes {len(groups)} responsibilities: {described}"
        )]

    # ------------------------------------------------------------------
    # OCP
    # ------------------------------------------------------------------

    def _check_open_closed(self, func: ast.FunctionDef) -> List[PrincipleViolation]:
        violations = []
        chained: Set[int] = set()

        for node in _walk_own(func):
            if not isinstance(node, ast.If) or id(node) in chained:
                continue

            literals_by_name: Dict[str, List[str]] = {}
            current = node
            while isinstance(current, ast.If):
                chained.add(id(current))
                compared = _string_comparison(current.test)
                if compared:
                    name, literal = compared
                    literals_by_name.setdefault(name, []).append(literal)
                current = current.orelse[0] if len(current.orelse) == 1 else None

            for name, literals in literals_by_name.items():
                if len(literals) >= 2:
                    violations.append(PrincipleViolation(
                        principle='OCP',
                        class_name=self._owner_of(func),
                        method_name=func.name,
                        line_number=node.lineno,
                        message=f"Branches on '{name}' against {len(literals)} type strings: {', '.join(literals)}"
                    ))

        return violations

    # ------------------------------------------------------------------
    # LSP / ISP
    # ------------------------------------------------------------------

    def _check_substitution(self, class_node: ast.ClassDef) -> List[PrincipleViolation]:
        violations = []

        for method in _methods(class_node):
            if not _only_raises(method):
                continue

            base_method = self._find_base_method(class_node, method.name)
            if base_method is None:
                continue

            base_class, base_def = base_method
            if _is_abstract(base_def):
                violations.append(PrincipleViolation(
                    principle='ISP',
                    class_name=class_node.name,
                    method_name=method.name,
                    line_number=method.lineno,
                    message=f"Forced to implement {base_class}.{method.name} and can only refuse it"
                ))
            else:
                violations.append(PrincipleViolation(
                    principle='LSP',
                    class_name=class_node.name,
                    method_name=method.name,
                    line_number=method.lineno,
                    message=f"Overrides working {base_class}.{method.name} with one that only raises"
                ))

        return violations

    def _find_base_method(self, class_node: ast.ClassDef, method_name: str, seen: Optional[Set[str]] = None):
        """Depth-first search of known base classes for a method definition."""
        seen = seen if seen is not None else {class_node.name}

        for base in class_node.bases:
            base_name = _name_of(base)
            if base_name is None or base_name in seen or base_name not in self.classes:
                continue
            seen.add(base_name)

            base_class = self.classes[base_name]
            for method in _methods(base_class):
                if method.name == method_name:
                    return base_name, method

            found = self._find_base_method(base_class, method_name, seen)
            if found:
                return found

        return None

    # ------------------------------------------------------------------
    # DIP
    # ------------------------------------------------------------------

    def _check_dependency_inversion(self, class_node: ast.ClassDef) -> List[PrincipleViolation]:
        violations = []

        for method in _methods(class_node):
            if method.name != '__init__':
                continue

            for node in ast.walk(method):
                if not isinstance(node, ast.Assign) or not isinstance(node.value, ast.Call):
                    continue

                created = _name_of(node.value.func)
                if not created or not created[0].isupper():
                    continue

                for target in node.targets:
                    if (isinstance(target, ast.Attribute)
                            and isinstance(target.value, ast.Name)
                            and target.value.id == 'self'):
                        violations.append(PrincipleViolation(
                            principle='DIP',
                            class_name=class_node.name,
                            method_name='__init__',
                            line_number=node.lineno,
                            message=f"Creates concrete {created} for self.{target.attr} instead of receiving an abstraction"
                        ))

        return violations

    def _owner_of(self, func: ast.FunctionDef) -> str:
        for class_node in self.classes.values():
            if func in class_node.body:
                return class_node.name
        return ""


def _methods(class_node: ast.ClassDef) -> List[ast.FunctionDef]:
    return [
        node for node in class_node.body
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))
    ]


def _responsibility_of(method_name: str) -> Optional[str]:
    if method_name.startswith('__') and method_name.endswith('__'):
        return None
    first_word = method_name.lstrip('_').split('_')[0].lower()
    for group, prefixes in RESPONSIBILITY_GROUPS.items():
        if first_word in prefixes:
            return group
    return None


def _walk_own(func: ast.FunctionDef):
    """Like ast.walk, but without entering nested functions or classes."""
    todo = deque(ast.iter_child_nodes(func))
    while todo:
        node = todo.popleft()
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            continue
        yield node
        todo.extend(ast.iter_child_nodes(node))


def _string_comparison(test: ast.expr):
    """Return (name, literal) for tests shaped like `name == "literal"`."""
    if not isinstance(test, ast.Compare) or len(test.ops) != 1 or not isinstance(test.ops[0], ast.Eq):
        return None

    left, right = test.left, test.comparators[0]
    for name_node, value_node in ((left, right), (right, left)):
        name = _name_of(name_node)
        if name and isinstance(value_node, ast.Constant) and isinstance(value_node.value, str):
            return name, value_node.value
    return None


def _name_of(node: ast.expr) -> Optional[str]:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    return None


def _only_raises(func: ast.FunctionDef) -> bool:
    body = list(func.body)
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant) \
            and isinstance(body[0].value.value, str):
        body = body[1:]
    return len(body) == 1 and isinstance(body[0], ast.Raise)


def _is_abstract(func: ast.FunctionDef) -> bool:
    return any(_name_of(decorator) == 'abstractmethod' for decorator in func.decorator_list)


def detect_in_file(file_path: str) -> List[PrincipleViolation]:
    """
    Convenience function to detect violations in a Python file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    return ViolationDetector(path.read_text(encoding='utf-8'), filename=str(path)).detect()


def detect_in_module(module_name: str) -> List[PrincipleViolation]:
    """
    Convenience function to detect violations in an importable module.

    Raises:
        SnippetError: If the module cannot be found
    """
    extractor = SnippetExtractor(module_name)
    try:
        path = extractor.locate()
    except SnippetError:
        logger.warning("Cannot check missing module %s", module_name)
        raise
    return detect_in_file(str(path))
