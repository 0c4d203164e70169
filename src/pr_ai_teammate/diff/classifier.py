"""
File Classifier

Maps a changed file path to production, test or config code.
"""

from ..models.diff import FileType


CONFIG_EXTENSIONS = ('.yml', '.yaml', '.json', '.toml', '.ini')

# Filename markers used by common unit-test conventions
TEST_STEM_SUFFIX = '_test'
TEST_MARKERS = ('.spec.', '.test.')


def classify_path(path: str) -> FileType:
    """
    Classify a file path.

    Test conventions win over config conventions, so ``test/fixtures.json``
    is a test file.

    Args:
        path: Repository-relative file path

    Returns:
        FileType of the path
    """
    lower = '/' + path.lower()
    filename = lower.rsplit('/', 1)[-1]

    if _is_test_path(lower, filename):
        return FileType.TEST

    if lower.endswith(CONFIG_EXTENSIONS) or '/config/' in lower:
        return FileType.CONFIG

    return FileType.PRODUCTION


def _is_test_path(lower: str, filename: str) -> bool:
    if '/test/' in lower:
        return True
    stem = filename.rsplit('.', 1)[0] if '.' in filename else ''
    if stem.endswith(TEST_STEM_SUFFIX):
        return True
    if filename.startswith('test_') and filename.endswith('.py'):
        return True
    return any(marker in filename for marker in TEST_MARKERS)
