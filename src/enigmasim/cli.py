from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from enigmasim import debug
from enigmasim.config import MachineConfig, build_machine, load_config
from enigmasim.core.errors import EnigmaError
from enigmasim.core.machine import Machine
from enigmasim.core.results import Transcript
from enigmasim.core.utils import group_blocks
from enigmasim.session import Session
from enigmasim.wirings import build_reflector, list_reflectors, list_rotors, register_all, rotor_wiring

app = typer.Typer(help="Enigma I emulator: three rotors, reflector and plugboard.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every rotor step and signal path."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write log messages to this file."),
):
    debug.configure(verbose=verbose, log_to=log_file)
    # Load the wiring tables exactly once per CLI run
    register_all()


def _machine_from_options(
    config: Optional[Path],
    rotors: Optional[str],
    rings: Optional[str],
    positions: Optional[str],
    reflector: Optional[str],
    plugs: Optional[str],
) -> Machine:
    try:
        cfg = load_config(config) if config is not None else MachineConfig()
        cfg = cfg.merged(rotors=rotors, rings=rings, positions=positions, reflector=reflector, plugs=plugs)
        return build_machine(cfg)
    except EnigmaError as e:
        raise typer.BadParameter(str(e))


@app.command()
def components():
    """List the available rotors and reflectors."""
    typer.echo("Rotors:")
    for name in list_rotors():
        wiring = rotor_wiring(name)
        typer.echo(f"  {name:<4} {wiring.ordering}  notch={''.join(sorted(wiring.notches))}")
    typer.echo("Reflectors:")
    for name in list_reflectors():
        typer.echo(f"  {name:<4} {build_reflector(name).ordering}")


@app.command()
def encipher(
    text: str = typer.Argument(..., help="Text to key in."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON machine configuration."),
    rotors: Optional[str] = typer.Option(None, "--rotors", "-r", help="Rotor names left to right, e.g. I,II,III."),
    rings: Optional[str] = typer.Option(None, "--rings", help="Ring settings left to right, e.g. AAA."),
    positions: Optional[str] = typer.Option(None, "--positions", "-p", help="Start positions left to right, e.g. ADU."),
    reflector: Optional[str] = typer.Option(None, "--reflector", help="Reflector name (A, B or C)."),
    plugs: Optional[str] = typer.Option(None, "--plugs", help='Plugboard pairs, e.g. "FT OB GU".'),
    strict: bool = typer.Option(False, "--strict", help="Fail on any character that is not A-Z instead of dropping it."),
    groups: bool = typer.Option(True, "--groups/--no-groups", help="Print output in five-letter groups."),
    as_json: bool = typer.Option(False, "--json", help="Print the transcript as JSON."),
):
    """
    Key text into the machine and print the lamp letters.

    Enciphering and deciphering are the same operation: feed the ciphertext
    back in with identical settings to recover the plaintext.
    """
    machine = _machine_from_options(config, rotors, rings, positions, reflector, plugs)

    if strict:
        try:
            ct = machine.encipher(text)
        except EnigmaError as e:
            raise typer.BadParameter(str(e))
        transcript = Transcript(plaintext=text, ciphertext=ct, settings=tuple(machine.settings()))
    else:
        session = Session(machine)
        session.type(text)
        transcript = session.snapshot()

    if as_json:
        typer.echo(json.dumps(transcript.to_dict()))
        return

    typer.echo(group_blocks(transcript.ciphertext) if groups else transcript.ciphertext)
    typer.echo(f"settings: {''.join(transcript.settings)}")


app.command("decipher", help="Same as encipher; the machine is its own inverse.")(encipher)


@app.command()
def session(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON machine configuration."),
    rotors: Optional[str] = typer.Option(None, "--rotors", "-r", help="Rotor names left to right, e.g. I,II,III."),
    rings: Optional[str] = typer.Option(None, "--rings", help="Ring settings left to right, e.g. AAA."),
    positions: Optional[str] = typer.Option(None, "--positions", "-p", help="Start positions left to right, e.g. ADU."),
    reflector: Optional[str] = typer.Option(None, "--reflector", help="Reflector name (A, B or C)."),
    plugs: Optional[str] = typer.Option(None, "--plugs", help='Plugboard pairs, e.g. "FT OB GU".'),
):
    """
    Type at the machine line by line.

    Commands: :settings shows the rotor windows, :reset returns to the start
    positions, :quit (or end of input) leaves.
    """
    sess = Session(_machine_from_options(config, rotors, rings, positions, reflector, plugs))
    typer.echo(f"Machine setup:{sess.rotor_display}")

    while True:
        try:
            line = typer.prompt("", prompt_suffix="> ", default="", show_default=False)
        except typer.Abort:
            break

        cmd = line.strip().lower()
        if cmd in (":quit", ":q"):
            break
        if cmd == ":reset":
            sess.reset()
            typer.echo(f"Machine setup:{sess.rotor_display}")
            continue
        if cmd == ":settings":
            typer.echo(f"Machine setup:{sess.rotor_display}")
            continue

        lit = sess.type(line)
        if lit:
            typer.echo(group_blocks(lit))

    transcript = sess.snapshot()
    plain, cipher = transcript.grouped()
    typer.echo(f"Input:  {plain}")
    typer.echo(f"Output: {cipher}")


def main():
    app()


if __name__ == "__main__":
    main()
