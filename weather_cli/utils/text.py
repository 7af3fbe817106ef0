def center(text: str, width: int) -> str:
    """
    Centre ``text`` in a field of ``width`` spaces.

    Odd padding puts the extra space on the right. Text already wider
    than the field is returned untouched.
    """
    pad = width - len(text)
    if pad <= 0:
        return text
    left = pad // 2
    return " " * left + text + " " * (pad - left)
