"""
Shell completion and usage examples for the statoo command.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

BASH_COMPLETION_ARG = "bash-completion"

FLAGS = [
    "-a", "-auth",
    "-commithash",
    "-f", "-find",
    "-h", "-help",
    "-j", "-json",
    "-request-header",
    "-response-header",
    "-s", "-skip",
    "-t", "-timeout",
    "-verbose",
    "-version",
]

BASH_COMPLETION = """__statoo_comp()
{{
    local cur
    cur="${{COMP_WORDS[COMP_CWORD]}}"
    opts="{opts}"
    COMPREPLY=( $(compgen -W "${{opts}}" -- "${{cur}}") )
}}
complete -F __statoo_comp statoo"""


def bash_completion() -> str:
    """Snippet to eval in bash: eval "$(statoo bash-completion)"."""
    return BASH_COMPLETION.format(opts=" ".join(FLAGS))


EXAMPLES = """\b
Examples:
    statoo "https://ugur.ozyilmazel.com"
    statoo -timeout 30 "https://ugur.ozyilmazel.com"
    statoo -verbose "https://ugur.ozyilmazel.com"
    statoo -json https://vigo.io
    statoo -json -find "python" https://vigo.io
    statoo -request-header "Authorization: Bearer TOKEN" https://vigo.io
    statoo -auth "user:secret" https://vigo.io
    statoo -json -response-header "Server: GitHub.com" https://vigo.io
    eval "$(statoo bash-completion)"
"""
