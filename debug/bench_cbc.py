#!/usr/bin/env python3
"""Quick AES-256-CBC stream benchmark across read chunk sizes"""
import io
import os
import time


PAYLOAD = os.urandom(8 * 1024 * 1024)
CHUNK_SIZES = (1024, 16 * 1024, 64 * 1024, 1 << 20)


def bench_python(chunk_size):
    """Benchmark encrypt_stream at one chunk size"""
    import fedcrypt

    material = fedcrypt.generate_key_material()
    dest = io.BytesIO()
    start = time.perf_counter()
    fedcrypt.encrypt_stream(io.BytesIO(PAYLOAD), dest, material.key, material.iv, chunk_size=chunk_size)
    elapsed = time.perf_counter() - start
    return elapsed, len(dest.getvalue())


def main():
    mib = len(PAYLOAD) / (1024 * 1024)
    print(f"Benchmarking AES-256-CBC encrypt_stream ({mib:.0f} MiB payload)...\n")

    for chunk_size in CHUNK_SIZES:
        elapsed, written = bench_python(chunk_size)
        print(f"  chunk {chunk_size:>8} B: {elapsed:.3f}s ({mib / elapsed:.1f} MiB/s, {written} bytes out)")

    print("\n✅ Benchmark complete")


if __name__ == '__main__':
    main()
