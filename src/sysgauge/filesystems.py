"""Filesystem-type filtering for disk metrics."""

# Pseudo and virtual filesystems that carry no user data.
IGNORED_FS_TYPES: frozenset[str] = frozenset(
    {
        "tmpfs",
        "devtmpfs",
        "proc",
        "sysfs",
        "cgroup2",
        "securityfs",
        "pstore",
        "efivarfs",
        "bpf",
        "configfs",
        "autofs",
        "debugfs",
        "hugetlbfs",
        "tracefs",
        "mqueue",
        "fusectl",
        "binfmt_misc",
        "rpc_pipefs",
        "overlay",  # Docker overlays
        "squashfs",  # Snap packages
        "nsfs",  # Docker namespaces
        "fuse.gvfsd-fuse",  # GNOME virtual file system
        "fuse.portal",  # GNOME portal
        "devpts",
        "selinuxfs",
    }
)


def keep_filesystem(fstype: str) -> bool:
    """
    Decide whether a filesystem type is worth reporting.

    Generic ``fuse.*`` mounts (encfs, sshfs, ...) are kept; mounted AppImages
    show up as ``fuse.<name>AppImage...`` and are dropped.
    """
    if fstype in IGNORED_FS_TYPES:
        return False
    return not (fstype.startswith("fuse.") and "AppImage" in fstype)
