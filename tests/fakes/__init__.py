from tests.fakes.corpus import make_corpus, make_graph
from tests.fakes.fake_committer import FakeCommitter
from tests.fakes.fake_file_mover import RecordingFileMover
from tests.fakes.fake_observer import RecordingObserver

__all__ = [
    "FakeCommitter",
    "RecordingFileMover",
    "RecordingObserver",
    "make_corpus",
    "make_graph",
]
