import logging as lg
from typing import List, Dict, Any

from synacor.common.hwconf import WORD_MASK

Tokens = List[Any]


class AsmError(Exception):
    pass


class FPP:
    ''' First pass processor '''
    words: List[int | str]      # label names are placeholders until the second pass
    label_dict: Dict[str, int]

    def __init__(self):
        self.words = list()
        self.label_dict = dict()

    @property
    def offset(self) -> int:
        return len(self.words)

    # Handlers
    def on_word(self, word: int):
        if word < 0 or word > WORD_MASK:
            raise AsmError(f'Word {word} out of 16-bit range')

        self.words.append(word)

    def issue_op(self, op: int):
        lg.debug(f'Issuing command {op} @ {self.offset}')
        self.on_word(op)

    def on_char(self, text: str):
        if len(text) != 1:
            raise AsmError(f'Character literal expected, got {text!r}')

        self.on_word(ord(text))

    def on_string(self, text: str):
        for char in text:
            self.on_char(char)

    def on_label(self, labelname: str):
        if labelname in self.label_dict:
            raise AsmError(f'Duplicate label {labelname}')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ {self.offset}')

    def on_ref(self, labelname: str):
        lg.debug(f'Ref {labelname}')
        self.words.append(labelname)
