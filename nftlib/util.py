import json
from functools import wraps

import typer
import yaml

from .errors import NftError


def protected(message=None):
    """ Turn NftErrors raised by a CLI command into `Error: ...` and exit status 1 """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except NftError as e:
                prefix = f"{message}: " if message else ""
                typer.echo(f"Error: {prefix}{e}", err=True)
                raise typer.Exit(code=1)
        return wrapper
    return decorator


def dump(data, *, as_json=False):
    if hasattr(data, "to_dict"):
        data = data.to_dict()

    if as_json:
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(yaml.safe_dump(data, sort_keys=False, default_flow_style=False), nl=False)
