

def int_to_bitstring(value: int, length: int) -> str:
    """
    Convert int -> bitstring of exactly `length` bits (leading zeros kept).

    The value must fit in `length` bits.
    """
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")
    if value.bit_length() > length:
        raise ValueError(
            f"Value {value} does not fit in {length} bits"
        )
    return f"{value:0{length}b}" if length else ""
