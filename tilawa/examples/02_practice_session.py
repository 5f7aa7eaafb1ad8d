"""
Practice Session Example for Tilawa

Shows how a host application wires a transcription service and a store
into a RecitationSession. The transcriber here is a stand-in that
returns fixed text; a real one would call a speech recognition API.
"""

from tilawa import InMemoryRecitationStore, RecitationSession, configure_logging
from tilawa.data import DEFAULT_VERSES


class EchoTranscriber:
    """Pretends every recording is a perfect recitation of one verse."""

    def __init__(self, text: str):
        self.text = text

    def transcribe(self, audio: bytes) -> str:
        return self.text


def main():
    configure_logging()

    store = InMemoryRecitationStore()
    session = RecitationSession(EchoTranscriber(DEFAULT_VERSES["1:2"]), store)

    for ayah in (1, 2, 3):
        record = session.recite("demo-user", surah=1, ayah=ayah, audio=b"")
        print(record)

    progress = session.progress("demo-user")
    print(f"\nTotal points:     {progress.total_jannah_points}")
    print(f"Recitations:      {progress.total_recitations}")
    print(f"Average accuracy: {progress.average_accuracy:.1f}%")
    print(f"Level:            {progress.current_level}")


if __name__ == "__main__":
    main()
