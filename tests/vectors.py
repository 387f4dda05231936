"""Published test vectors (RFC 1321, FIPS 180-4 examples, FIPS 202 examples)."""

ABC = b"abc"
EMPTY = b""
FOX = b"The quick brown fox jumps over the lazy dog"
MSG_448 = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
MSG_896 = (
    b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
    b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu"
)

MD5 = {
    EMPTY: "d41d8cd98f00b204e9800998ecf8427e",
    ABC: "900150983cd24fb0d6963f7d28e17f72",
    b"message digest": "f96b697d7cb7938d525a2f31aaf161d0",
    FOX: "9e107d9d372bb6826bd81d3542a419d6",
}

SHA1 = {
    EMPTY: "da39a3ee5e6b4b0d3255bfef95601890afd80709",
    ABC: "a9993e364706816aba3e25717850c26c9cd0d89d",
    MSG_448: "84983e441c3bd26ebaae4aa1f95129e5e54670f1",
}

SHA224 = {
    EMPTY: "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    ABC: "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
}

SHA256 = {
    EMPTY: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    ABC: "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    MSG_448: "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1",
}

SHA384 = {
    EMPTY: (
        "38b060a751ac96384cd9327eb1b1e36a21fdb71114be0743"
        "4c0cc7bf63f6e1da274edebfe76f65fbd51ad2f14898b95b"
    ),
    ABC: (
        "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded163"
        "1a8b605a43ff5bed8086072ba1e7cc2358baeca134c825a7"
    ),
}

SHA512 = {
    EMPTY: (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
    ABC: (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    ),
}

SHA512_224 = {
    ABC: "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa",
}

SHA512_256 = {
    ABC: "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
}

SHA3_224 = {
    ABC: "e642824c3f8cf24ad09234ee7d3c766fc9a3a5168d0c94ad73b46fdf",
}

SHA3_256 = {
    EMPTY: "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a",
    ABC: "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532",
}

SHA3_384 = {
    ABC: (
        "ec01498288516fc926459f58e2c6ad8df9b473cb0fc08c25"
        "96da7cf0e49be4b298d88cea927ac7f539f1edf228376d25"
    ),
}

SHA3_512 = {
    ABC: (
        "b751850b1a57168a5693cd924b6b096e08f621827444f70d884f5d0240d2712e"
        "10e116e9192af3c91a7ec57647e3934057340b4cf408d5a56592f8274eec53f0"
    ),
}

# (data, output bytes): hex
SHAKE128 = {
    (EMPTY, 32): "7f9c2ba4e88f827d616045507605853ed73b8093f6efbc88eb1a6eacfa66ef26",
}

SHAKE256 = {
    (EMPTY, 64): (
        "46b9dd2b0ba88d13233b3feb743eeb243fcd52ea62b81b82b50c27646ed5762f"
        "d75dc4ddd8c0f200cb05019d67b592f6fc821c49479ab48640292eacb3b7c4be"
    ),
}

# first lane of Keccak-f[1600] applied to the all-zero state
KECCAK_ZERO_LANE0 = 0xF1258F7940E1DDE7
