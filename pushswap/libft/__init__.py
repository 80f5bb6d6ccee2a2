"""Character, byte buffer, string, stream output and linked-list helpers."""