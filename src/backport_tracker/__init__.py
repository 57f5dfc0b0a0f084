"""Backport tracker — clone-chain verification and completion board for issue documents."""
