"""Assinatura do SignedKeyRequest (EIP-712) para signers Farcaster.

O app (FID + mnemonic de desenvolvedor) assina a public key do signer
recém-criado; a Neynar devolve então o signer em ``pending_approval``
com ``signer_approval_url`` para o usuário aprovar no Warpcast.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from eth_account import Account

from utils.errors import SignerConfigError

if TYPE_CHECKING:
    from eth_account.signers.local import LocalAccount

# Contrato SignedKeyRequestValidator na OP Mainnet
SIGNED_KEY_REQUEST_VALIDATOR_DOMAIN: dict[str, Any] = {
    "name": "Farcaster SignedKeyRequestValidator",
    "version": "1",
    "chainId": 10,
    "verifyingContract": "0x00000000FC700472606ED4fA22623Acf62c60553",
}

SIGNED_KEY_REQUEST_TYPES: dict[str, list[dict[str, str]]] = {
    "SignedKeyRequest": [
        {"name": "requestFid", "type": "uint256"},
        {"name": "key", "type": "bytes"},
        {"name": "deadline", "type": "uint256"},
    ],
}

Account.enable_unaudited_hdwallet_features()


def signed_key_deadline(ttl_seconds: int) -> int:
    """Deadline unix (agora + ttl) para o SignedKeyRequest."""
    return int(time.time()) + ttl_seconds


def build_signed_key_request(app_fid: int, public_key: str, deadline: int) -> dict[str, Any]:
    """Mensagem EIP-712 com a public key (hex) do signer.

    Raises:
        ValueError: public_key não é hex.
    """
    return {
        "requestFid": app_fid,
        "key": bytes.fromhex(public_key.removeprefix("0x")),
        "deadline": deadline,
    }


def derive_app_account(mnemonic: str) -> LocalAccount:
    """Deriva a conta do app (path padrão m/44'/60'/0'/0/0).

    Raises:
        SignerConfigError: mnemonic ausente ou inválido.
    """
    if not mnemonic.strip():
        raise SignerConfigError("FARCASTER_DEVELOPER_MNEMONIC não configurado")
    try:
        return Account.from_mnemonic(mnemonic.strip())
    except Exception as exc:
        raise SignerConfigError("FARCASTER_DEVELOPER_MNEMONIC inválido") from exc


def sign_key_request(
    account: LocalAccount,
    app_fid: int,
    public_key: str,
    deadline: int,
) -> str:
    """Assina o SignedKeyRequest com a conta do app.

    Returns:
        Assinatura hex com prefixo 0x.

    Raises:
        ValueError: public_key não é hex.
    """
    signed = account.sign_typed_data(
        domain_data=SIGNED_KEY_REQUEST_VALIDATOR_DOMAIN,
        message_types=SIGNED_KEY_REQUEST_TYPES,
        message_data=build_signed_key_request(app_fid, public_key, deadline),
    )
    return "0x" + bytes(signed.signature).hex()
