"""Character, conversion, memory, string, list, line-reading and output helpers."""