"""Component tests running page objects against static markup."""
