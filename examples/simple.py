import sys

from cmdparse import Context, OptionFlag, ValidationError

ctx = Context("simple.py [options] command [arguments]")
verbose = ctx.add_flag("verbose", "v", "Talk more")
level = ctx.add_option("level", "l", "Log level (integer)", OptionFlag.TAKES_ARG)
ctx.add_option("debug", None, "Internal debugging", OptionFlag.HIDDEN)
clean, clean_scope = ctx.add_command("clean", "Remove build artefacts")
everything = clean_scope.add_flag("all", "a", "Remove everything")

try:
    ctx.validate()
except ValidationError as error:
    ctx.print_help(error.message)
    sys.exit(2)

print(f"verbose given {ctx.count(verbose)} time(s)")
print(f"level = {ctx.value_or(level, 1)}")
if ctx.check(clean):
    print(f"cleaning, all={ctx.check(everything)}")
print(f"arguments: {ctx.get_leftover_args()}")
