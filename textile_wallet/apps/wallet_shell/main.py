"""
Textile wallet shell
"""
import base64
import binascii
import json
from pathlib import Path

import click
from click_shell import shell  # type: ignore
from nacl.exceptions import CryptoError

from textile_wallet.account.error import AccountError
from textile_wallet.apps.wallet_shell.app import App
from textile_wallet.core.logging import configure_logging
from textile_wallet.hd.error import DerivationError
from textile_wallet.key.error import InvalidKey
from textile_wallet.wallet.error import WalletError

__app: App | None = None
__config_file: Path | None = None

# errors that are reported to the user instead of terminating the shell
_USER_ERRORS = (InvalidKey, AccountError, DerivationError, WalletError, CryptoError)


class AppNotInitialized(Exception):
    pass


def get_app() -> App:
    if __app is None:
        raise AppNotInitialized
    return __app


def decode_base64(value: str) -> bytes:
    try:
        return base64.b64decode(value.strip(), validate=True)
    except binascii.Error as err:
        raise click.BadParameter(f"invalid base64: {err}") from err


@shell(
    prompt="textile-wallet > ",
    intro="Textile Wallet Shell",
)
@click.option(
    "--config-file",
    required=False,
    type=click.Path(exists=True, resolve_path=True, readable=True, path_type=Path),
    help="TOML config file",
)
def app(config_file: Path | None = None):
    global __app
    global __config_file

    try:
        __app = App.from_config_file(config_file) if config_file else App({})
    except (WalletError, ValueError) as err:
        raise click.ClickException(f"invalid config: {err}") from err
    __config_file = config_file
    configure_logging(level=__app.log_level)


@app.command
def show_config():
    """
    Displays the application config as JSON
    """
    click.echo(__config_file)
    click.echo(json.dumps(get_app().config, indent=3))


@app.command
@click.option(
    "--word-count",
    type=click.INT,
    help="Number of words in the recovery phrase: 12, 15, 18, 21, or 24",
)
def new_wallet(word_count: int | None):
    """
    Generates a new wallet recovery phrase and displays its first account.
    """
    try:
        wallet = get_app().new_wallet(word_count)
        first_account = wallet.derive_account(0)
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    click.echo("Recovery phrase - write it down and store it securely:")
    click.echo(wallet.recovery_phrase)
    click.echo("-" * len(wallet.recovery_phrase))
    for i, word in enumerate(wallet.recovery_phrase.split(), start=1):
        click.echo(f"{i} : {word}")
    click.echo(f"Account 0 address: {first_account.address}")


@app.command
@click.option(
    "--recovery-phrase",
    required=True,
    prompt="Recovery Phrase",
    hide_input=True,
    help="BIP-39 recovery phrase",
)
@click.option(
    "--passphrase",
    default="",
    prompt="Passphrase",
    hide_input=True,
    help="Optional BIP-39 passphrase",
)
@click.option("--count", default=1, type=click.INT, help="Number of accounts")
@click.option("--start", default=0, type=click.INT, help="First account index")
@click.option("--show-seeds", is_flag=True, help="Display account seeds")
def derive_accounts(
    recovery_phrase: str, passphrase: str, count: int, start: int, show_seeds: bool
):
    """
    Derives wallet accounts from the recovery phrase.
    """
    try:
        accounts = get_app().derive_accounts(recovery_phrase, count, passphrase, start)
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    for index, derived in enumerate(accounts, start=start):
        click.echo(f"{index} : {derived.address}")
        if show_seeds:
            click.echo(f"{index} : {derived.seed}")


@app.command
def random_account():
    """
    Generates a new random account that is not derived from a wallet.
    """
    new_account = get_app().random_account()
    click.echo(f"Address: {new_account.address}")
    click.echo(f"Seed: {new_account.seed}")


@app.command
@click.argument("key")
def inspect_key(key: str):
    """
    Displays information for a key encoded address or seed.
    """
    try:
        info = get_app().inspect_key(key)
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    click.echo(f"Kind: {info.version.name}")
    click.echo(f"Address: {info.address}")
    click.echo(f"Hint: {info.hint}")
    click.echo(f"Peer ID: {info.peer_id}")
    click.echo(f"Can Sign: {info.can_sign}")


@app.command
@click.option("--seed", required=True, prompt="Seed", hide_input=True)
@click.option("--message", required=True, prompt="Message")
def sign(seed: str, message: str):
    """
    Signs the UTF-8 message and displays the base64 encoded signature.
    """
    try:
        signature = get_app().sign(seed, message.encode())
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    click.echo(base64.b64encode(signature).decode())


@app.command
@click.option("--address", required=True, prompt="Address")
@click.option("--message", required=True, prompt="Message")
@click.option("--signature", required=True, prompt="Signature (base64)")
def verify(address: str, message: str, signature: str):
    """
    Verifies the base64 encoded signature for the UTF-8 message.
    """
    try:
        get_app().verify(address, message.encode(), decode_base64(signature))
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    click.echo("Signature is valid.")


@app.command
@click.option("--address", required=True, prompt="Address")
@click.option("--message", required=True, prompt="Message")
def encrypt(address: str, message: str):
    """
    Encrypts the UTF-8 message for the address and displays the base64 encoded ciphertext.
    """
    try:
        ciphertext = get_app().encrypt(address, message.encode())
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    click.echo(base64.b64encode(ciphertext).decode())


@app.command
@click.option("--seed", required=True, prompt="Seed", hide_input=True)
@click.option("--ciphertext", required=True, prompt="Ciphertext (base64)")
def decrypt(seed: str, ciphertext: str):
    """
    Decrypts the base64 encoded ciphertext and displays the UTF-8 message.
    """
    try:
        message = get_app().decrypt(seed, decode_base64(ciphertext))
    except _USER_ERRORS as err:
        raise click.ClickException(str(err)) from err

    click.echo(message.decode(errors="replace"))


if __name__ == "__main__":
    app()
