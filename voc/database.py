"""Vocabulary database: a directory whose regular files are vocabulary files."""
import logging
import os
import random
import stat
import time

from voc import config
from voc.errors import (
    FilesystemError,
    NoRegularFiles,
    NotADatabaseError,
    NotAVocabFileError,
    UsageError,
)

logger = logging.getLogger(__name__)


def make_rng(seed=None):
    """Create the process random generator, seeded once."""
    if seed is None:
        seed = config.SEED
    if seed is None:
        seed = time.time_ns()
    logger.debug("random seed %s", seed)
    return random.Random(seed)


def _stat(path):
    try:
        return os.stat(path)
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e


def check_database(db_dir):
    if not stat.S_ISDIR(_stat(db_dir).st_mode):
        raise NotADatabaseError(db_dir)


def list_regular_files(db_dir):
    """Names of the regular files directly inside db_dir, sorted."""
    try:
        with os.scandir(db_dir) as it:
            names = [e.name for e in it if e.is_file(follow_symlinks=False)]
    except OSError as e:
        raise FilesystemError(db_dir, e.strerror or str(e), op="opendir") from e
    return sorted(names)


def pick_random_file(db_dir, rng):
    files = list_regular_files(db_dir)
    if not files:
        raise NoRegularFiles(db_dir)
    name = rng.choice(files)
    logger.debug("picked %s out of %d files in %s", name, len(files), db_dir)
    return name


def resolve_vocab_file(db_dir, name):
    """Path of the vocabulary file name inside db_dir, checked to be regular."""
    if os.path.isabs(name):
        raise UsageError(f"{name} must be relative to the db, not absolute")
    path = os.path.join(db_dir, name)
    if not stat.S_ISREG(_stat(path).st_mode):
        raise NotAVocabFileError(path)
    logger.debug("vocabulary file %s", path)
    return path
