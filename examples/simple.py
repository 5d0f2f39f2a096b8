import asyncio

from concli import ArgumentDefinition, CommandLine, Flag, StringTypeValidator
from concli.utils import setup_logging

setup_logging()

# A single action with one required and one optional argument
copy = CommandLine.create_action(
    "copy",
    "Copy a file to a destination",
    [
        ArgumentDefinition("source", StringTypeValidator(), description="File to copy"),
        ArgumentDefinition(
            "dest", StringTypeValidator(), default_value="output", description="Target"
        ),
    ],
)
force = Flag("force", description="Overwrite the destination", long="force", short="f")
copy.flags.add(force)


@copy.handler
async def do_copy(result, source: str, dest: str, *extra: str) -> None:
    await asyncio.sleep(0.1)
    mode = "overwriting" if result.get_value(force) else "copying"
    print(f"{mode} {source} -> {dest}")
    if extra:
        print(f"ignored: {', '.join(extra)}")


# Entry point
if __name__ == "__main__":
    CommandLine.main(copy)
