"""Kernel guard service, device classification, guarded syscalls and audit log."""