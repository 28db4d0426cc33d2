from huffcode.pipeline.config import CodecConfig
from huffcode.pipeline.runner import decode_message, encode_decode, encode_message


def run_batch_on_folder(*args, **kwargs):
    # Lazy import so importing `huffcode.pipeline` doesn't pull the reporting
    # stack (pandas) unless batch execution is actually requested.
    from huffcode.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "CodecConfig",
    "decode_message",
    "encode_decode",
    "encode_message",
    "run_batch_on_folder",
]
