import rich_click as click


click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.COMMAND_GROUPS = {
    "enumkit": [
        {
            "name": "Registry",
            "commands": ["ls", "values"],
        },
        {
            "name": "Utilities",
            "commands": ["convert"],
        },
    ]
}

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

COLOR_CHOICES = ["auto", "standard", "256", "truecolor", "windows", "none"]
