from ntfs_remount.api.cli import main

main()
