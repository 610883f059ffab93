import argparse
import logging
import sys

from .config import DEFAULT_INDEX_CONFIG, DEFAULT_SECURITY_LENGTH_BYTES, MIN_SECURITY_LENGTH_BYTES
from .errors import ThresholdElGamalError
from .params import setup
from .shares import issue_shares
from .combiner import combine
from .cipher import encrypt, decrypt


def run(args):
    config = DEFAULT_INDEX_CONFIG
    print(f"=== Threshold ElGamal Demo ({args.security_bytes * 8}-bit modulus) ===")

    params = setup(args.security_bytes)
    print(f"p = {params.p}")
    print(f"q = {params.q}")
    print(f"g = {params.g}\n")

    key_shares = issue_shares(params, args.participants, config)
    print("Public shares:")
    for share in key_shares:
        print(f"Participant {share.index}: {share.public.value}")
    print()

    combined = combine(params, [share.public for share in key_shares], config)
    print(f"Combined public key: {combined.public_key}")
    print("Refreshed shares:")
    for share in combined.shares:
        print(f"Index {share.index}: {share.value}")
    print()

    message = args.message.encode()
    ciphertext = encrypt(params, combined.shares, combined.public_key, message)
    print(f"Message: {args.message}")
    print(f"Ciphertext: c1={ciphertext.c1}, c2={ciphertext.c2}\n")

    decryptor = next(share for share in key_shares if share.index == args.decryptor)
    recovered = decrypt(params, decryptor.private, ciphertext, config)
    print(f"Decrypted by participant {args.decryptor}: {recovered.decode(errors='replace')}")
    return recovered == message


def main(argv=None):
    parser = argparse.ArgumentParser(description="Threshold ElGamal Demo")
    parser.add_argument("-b", "--security-bytes", type=int, default=DEFAULT_SECURITY_LENGTH_BYTES,
                        help=f"Modulus length in bytes (default: {DEFAULT_SECURITY_LENGTH_BYTES})")
    parser.add_argument("-n", "--participants", type=int, default=3, help="Number of participants (default: 3)")
    parser.add_argument("-m", "--message", type=str, default="hi", help="Message to encrypt (default: hi)")
    parser.add_argument("-d", "--decryptor", type=int, default=None,
                        help="Index of the participant who decrypts (default: the second participant)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    user_index = DEFAULT_INDEX_CONFIG.user_index
    if args.security_bytes < MIN_SECURITY_LENGTH_BYTES:
        parser.error(f"Security length must be at least {MIN_SECURITY_LENGTH_BYTES} bytes.")
    if args.participants < 2:
        parser.error("At least two participants are required.")
    if args.decryptor is None:
        args.decryptor = user_index + 1
    if not user_index <= args.decryptor < user_index + args.participants:
        parser.error(f"Decryptor must be one of the participant indices {user_index}..{user_index + args.participants - 1}.")
    if len(args.message.encode()) >= args.security_bytes:
        parser.error("Message must be shorter than the modulus.")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        ok = run(args)
    except ThresholdElGamalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Round trip ok? {ok}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
