"""
Text and file actions behind the buttons of the main window.

Handlers get everything they need from an AppContext passed in by the
caller, so they can be driven without a window.
"""
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from algorithms.hex_codec import decode_text, encode_text
from algorithms.RLE import RLECompressor

APP_TITLE = "RLE Encoder/Decoder"
ABOUT_TEXT = (
    "Run-length encoder and decoder for text and files.\n\n"
    "Text is encoded as hex pairs of (count, byte). "
    "Files are written next to the original with an "
    ".encoded or .decoded suffix."
)
ENCODED_SUFFIX = ".encoded"
DECODED_SUFFIX = ".decoded"


class Action(Enum):
    ENCODE = "encode"
    DECODE = "decode"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @property
    def suffix(self) -> str:
        return ENCODED_SUFFIX if self is Action.ENCODE else DECODED_SUFFIX


@dataclass(frozen=True)
class AppContext:
    working_dir: Path
    output_dir: Optional[Path] = None
    verbose: bool = False


@dataclass(frozen=True)
class FileResult:
    source: Path
    destination: Path
    input_size: int
    output_size: int
    log: str


def output_path(source: Union[str, Path], action: Action, ctx: AppContext) -> Path:
    """Result file name: the source name with the action suffix appended."""
    source = Path(source)
    name = source.name + action.suffix
    if ctx.output_dir is not None:
        return Path(ctx.output_dir) / name
    return source.with_name(name)


def text_action(action: Action, text: str, ctx: AppContext) -> str:
    """
    Encodes text to hex, or decodes hex back to text.

    Raises:
        MalformedInput: when decoding text that is not valid run-code hex
    """
    if action is Action.ENCODE:
        result = encode_text(text)
    else:
        result = decode_text(text.strip())
    if ctx.verbose:
        print(f"{action.title}d {len(text)} characters into {len(result)}")
    return result


def file_action(action: Action, source: Union[str, Path], ctx: AppContext) -> FileResult:
    """
    Encodes or decodes a whole file, writing the result next to it.

    Raises:
        IOFailure: when the source cannot be read or the result written
        MalformedInput: when decoding a file that is not run-code data
    """
    source = Path(source)
    if not source.is_absolute():
        source = Path(ctx.working_dir) / source
    destination = output_path(source, action, ctx)

    if action is Action.ENCODE:
        log_info = RLECompressor.compress_file(str(source), str(destination))
    else:
        log_info = RLECompressor.decompress_file(str(source), str(destination))

    result = FileResult(
        source=source,
        destination=destination,
        input_size=os.path.getsize(source),
        output_size=os.path.getsize(destination),
        log=log_info,
    )
    if ctx.verbose:
        print(f"{action.title}d {source} -> {destination}")
        print(log_info)
    return result
