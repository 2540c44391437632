# -*- coding: utf-8 -*-


def write_lines(filename, lines):
    with open(filename, "w") as f:
        f.write("\n".join(lines) + "\n")

    return filename
