def bdecode(buff):
    """
    Return <buff> as a str, dropping the bytes that are not valid utf-8.
    """
    if isinstance(buff, bytes):
        return buff.decode("utf-8", errors="ignore")
    return buff


def empty_string(buff):
    return not buff.strip(" \n")
