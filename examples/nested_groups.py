from concli import (
    ArgumentDefinition,
    CommandLine,
    Flag,
    IntegerTypeValidator,
    StringEnumTypeValidator,
    StringTypeValidator,
    ValueFlag,
)

root = CommandLine.create_group("tool", "Example tool with nested command groups")
verbose = Flag("verbose", description="Enable verbose output", long="verbose", short="v")
root.flags.add(verbose)

config = root.create_group("config", "Read and write configuration values")
fmt = ValueFlag(
    "format",
    StringEnumTypeValidator(["text", "json"]),
    default_value="text",
    description="Output format",
    long="format",
    short="f",
)
config.flags.add(fmt)

get = config.create_action(
    "get", "Print a configuration value", [ArgumentDefinition("key", StringTypeValidator())]
)
set_ = config.create_action(
    "set",
    "Store a configuration value",
    [
        ArgumentDefinition("key", StringTypeValidator()),
        ArgumentDefinition("value", StringTypeValidator(), default_value=""),
    ],
)
repeat = root.create_action(
    "repeat",
    "Print a word several times",
    [
        ArgumentDefinition("word", StringTypeValidator()),
        ArgumentDefinition("count", IntegerTypeValidator(), default_value=1),
    ],
)

settings: dict[str, str] = {}


@root.handler
def show_root(result) -> None:
    print("Run 'tool --help' to list the commands.")


def on_root_flags(result) -> None:
    if result.get_value(verbose):
        print("verbose output enabled")


root.on_flags = on_root_flags


@get.handler
def do_get(result, key: str) -> None:
    value = settings.get(key, "<unset>")
    if result.get_value(fmt) == "json":
        print(f'{{"{key}": "{value}"}}')
    else:
        print(f"{key} = {value}")


@set_.handler
def do_set(result, key: str, value: str) -> None:
    settings[key] = value
    print(f"{key} set to '{value}'")


@repeat.handler
async def do_repeat(result, word: str, count: int) -> None:
    print(" ".join([word] * count))


if __name__ == "__main__":
    CommandLine.main(root)
