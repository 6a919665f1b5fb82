"""Binary codec for collection files.

``primitives`` holds the bounded-string and fixed-width number routines shared
by every record kind; ``factories`` rebuilds concrete records from a stream.
"""
