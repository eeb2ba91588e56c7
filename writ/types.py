# Writ Argument Decoder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Destination types used to pick option decoders.

Python integers and floats are unbounded, so these `NewType` aliases carry the
bit width a destination should be limited to. They are plain `int`/`float`
at runtime and only matter to `new_option_decoder()` and the spec builder.

Example:
    @dataclass
    class Spec:
        level: Annotated[int8, option("l, level")] = 0
        output: Annotated[OutputFile | None, option("o")] = None
"""
from typing import NewType, TextIO

int8 = NewType("int8", int)
int16 = NewType("int16", int)
int32 = NewType("int32", int)
int64 = NewType("int64", int)
uint = NewType("uint", int)
uint8 = NewType("uint8", int)
uint16 = NewType("uint16", int)
uint32 = NewType("uint32", int)
uint64 = NewType("uint64", int)
float32 = NewType("float32", float)
float64 = NewType("float64", float)

InputFile = NewType("InputFile", TextIO)
OutputFile = NewType("OutputFile", TextIO)

SIGNED_WIDTHS: dict[object, int] = {
    int: 64,
    int8: 8,
    int16: 16,
    int32: 32,
    int64: 64,
}

UNSIGNED_WIDTHS: dict[object, int] = {
    uint: 64,
    uint8: 8,
    uint16: 16,
    uint32: 32,
    uint64: 64,
}

FLOAT_WIDTHS: dict[object, int] = {
    float: 64,
    float32: 32,
    float64: 64,
}
