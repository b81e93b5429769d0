"""Mode bit masks for `stat` style mode values, named after the C macros of
the same (similar) name.

Defined here rather than taken from the standard ``stat`` module so that the
values are the POSIX ones whatever platform we happen to be running on.
"""

from typing import Final


# File type field

S_IFMT   : Final = 0o00170000   # file type mask

S_IFIFO  : Final = 0o00010000   # pipe
S_IFCHR  : Final = 0o00020000   # character device
S_IFDIR  : Final = 0o00040000   # directory
S_IFBLK  : Final = 0o00060000   # block device
S_IFREG  : Final = 0o00100000   # regular
S_IFLNK  : Final = 0o00120000   # sym-link
S_IFSOCK : Final = 0o00140000   # socket

# Special bits

S_ISUID  : Final = 0o00004000   # set-user-ID
S_ISGID  : Final = 0o00002000   # set-group-ID
S_ISVTX  : Final = 0o00001000   # sticky

# Permission bits, one triplet per class

S_IRUSR  : Final = 0o00000400
S_IWUSR  : Final = 0o00000200
S_IXUSR  : Final = 0o00000100

S_IRGRP  : Final = 0o00000040
S_IWGRP  : Final = 0o00000020
S_IXGRP  : Final = 0o00000010

S_IROTH  : Final = 0o00000004
S_IWOTH  : Final = 0o00000002
S_IXOTH  : Final = 0o00000001

S_IRWXU  : Final = 0o00000700   # owner triplet
S_IRWXG  : Final = 0o00000070   # group triplet
S_IRWXO  : Final = 0o00000007   # other triplet

S_IMODE_MASK : Final = 0o00007777   # permission + special bits

S_IRALL  : Final = 0o00000444   # Readable by all
S_IWALL  : Final = 0o00000222   # Writable by all
S_IXALL  : Final = 0o00000111   # Executable by all (means "listable" for a directory!)
