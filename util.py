import sys
from io import StringIO

_verbose = 0


def set_verbosity(n):
    global _verbose
    _verbose = n


def diag(level, message, out=None):
    """
    print a tagged diagnostic line if the verbosity is at least `level`
    """
    if _verbose >= level:
        print(message, file=sys.stderr if out is None else out)


class CapturingStdout(list):

    def __enter__(self):
        self._stdout = sys.stdout
        sys.stdout = self._stringio = StringIO()
        return self

    def __exit__(self, *args):
        self.extend(self._stringio.getvalue().splitlines())
        sys.stdout = self._stdout


class CapturingStderr(list):

    def __enter__(self):
        self._stderr = sys.stderr
        sys.stderr = self._stringio = StringIO()
        return self

    def __exit__(self, *args):
        self.extend(self._stringio.getvalue().splitlines())
        sys.stderr = self._stderr


def split_clark(name):
    """
    split a '{uri}local' name into (uri, local), uri is None when there is no namespace
    """
    if name[:1] == '{':
        uri, local = name[1:].split('}', 1)
        return uri, local
    return None, name

