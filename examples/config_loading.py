"""config_loading.py"""

import sys

from cmdparse.config import loader
from cmdparse.exceptions import ValidationError

ctx, handles = loader("cmdparse.yaml")

if __name__ == "__main__":
    try:
        ctx.validate()
    except ValidationError as error:
        ctx.print_help(error.message)
        sys.exit(2)

    for key, handle in handles.items():
        print(f"{key}: {ctx.count(handle)}")
