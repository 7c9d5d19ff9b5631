"""
Line buffer used to assemble the generated Dart source
"""

from typing import Iterable, List

_OPENERS = ('{', '(', '[')
_CLOSERS = ('}', ')', ']')


class CodeBuffer:
    """Collects lines of code and indents them by bracket depth"""

    def __init__(self, indent: str = '  '):
        self.indent = indent
        self._lines: List[str] = []
        self._depth = 0

    def writeln(self, line: str = '') -> 'CodeBuffer':
        """Write one line, indented by the current bracket depth"""
        stripped = line.strip()
        if stripped.startswith(_CLOSERS):
            self._depth = max(0, self._depth - 1)
        self._lines.append(self.indent * self._depth + stripped if stripped else '')
        if stripped.endswith(_OPENERS):
            self._depth += 1
        return self

    def write_raw(self, text: str) -> 'CodeBuffer':
        """Write text verbatim, without touching indentation"""
        self._lines.extend(text.split('\n'))
        return self

    def write_doc(self, text: str, prefix: str = '/// ') -> 'CodeBuffer':
        """Write a (possibly multi-line) documentation comment"""
        for line in text.split('\n'):
            self.writeln((prefix + line).rstrip())
        return self

    def write_imports(self, imports: Iterable[str]) -> 'CodeBuffer':
        """Write sorted, de-duplicated import directives"""
        dart_imports = sorted({i for i in imports if i.startswith('dart:')})
        other_imports = sorted({i for i in imports if not i.startswith('dart:')})
        for group in (dart_imports, other_imports):
            if not group:
                continue
            for uri in group:
                self.writeln(f"import '{uri}';")
            self.writeln()
        return self

    def getvalue(self) -> str:
        text = '\n'.join(self._lines).rstrip('\n')
        return text + '\n'

    def __str__(self) -> str:
        return self.getvalue()
