"""
Tiny helper script that runs the readability check over a few sample sentences
at several target ages.
"""

from __future__ import annotations

from readability_lint import check_text, resolve_config


def main() -> None:
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon that occurs when particles share proximity in ways such that their states cannot be described independently.",
    ]

    for age in (10, 16, 20):
        config = resolve_config(age=age)
        print("=" * 40)
        print(f"Target age: {age}")
        for sample in samples:
            messages = check_text(sample, config)
            print("-" * 40)
            print(sample)
            for message in messages:
                print(f"  {message} [{message.confidence_label}]")
            if not messages:
                print("  ok")


if __name__ == "__main__":
    main()
