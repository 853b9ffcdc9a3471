from pathlib import Path
from typing import Optional

from engine.vocab import WordVocab


def load_dictionary(path: str, column: str = "word", word_len: Optional[int] = None) -> WordVocab:
    """
    Load the solver dictionary from `path`.
    '.csv' files are read with pandas from `column`; anything else is a plain
    word list with one word per line.
    """
    if Path(path).suffix.lower() == ".csv":
        return WordVocab.from_csv(path, column=column, word_len=word_len)
    return WordVocab.from_txt(path, word_len=word_len)
