# Make the flat top-level modules importable when running from the repository root
import os
import sys

import pytest

ROOT = os.path.dirname(os.path.abspath(os.path.join(__file__, os.pardir)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


ASCII_TEXT = (
    "Keccak is a versatile cryptographic function. Best known as a hash function, it nevertheless "
    "can also be used for authentication, (authenticated) encryption and pseudo-random number "
    "generation. Its structure is the extremely simple sponge construction and internally it uses "
    "the innovative Keccak-f cryptographic permutation."
)

UTF8_TEXT = (
    "Lorem Ipsum - это текст - рыба, часто используемый в печати и вэб-дизайне. Lorem Ipsum является "
    "стандартной рыбой для текстов на латинице с начала XVI века. В то время некий безымянный печатник "
    "создал большую коллекцию размеров и форм шрифтов, используя Lorem Ipsum для распечатки образцов. "
    "Lorem Ipsum не только успешно пережил без заметных изменений пять веков, но и перешагнул в "
    "электронный дизайн. Его популяризации в новое время послужили публикация листов Letraset с "
    "образцами Lorem Ipsum в 60-х годах и, в более недавнее время, программы электронной вёрстки типа "
    "Aldus PageMaker, в шаблонах которых используется Lorem Ipsum."
)


@pytest.fixture(params=["", ASCII_TEXT, UTF8_TEXT], ids=["empty", "ascii", "utf8"])
def message(request) -> str:
    return request.param
