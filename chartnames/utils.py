MAX_NAME_LENGTH = 63

# kubernetes names and label values are capped at 63 characters and must not end in a hyphen
def trunc_name(s: str, length: int = MAX_NAME_LENGTH) -> str:
    s = s[:length]
    s = s.rstrip('-')
    return s
