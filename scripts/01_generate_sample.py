from __future__ import annotations

from markov_text import MarkovTextError, Mode, NumpyRandomSource, build_frequency_model, generate_text


def main() -> None:
    text = (
        "natural language processing is fun. "
        "start small, iterate, and learn by coding. "
        "small models learn small patterns. is it fun? it is!"
    )

    rng = NumpyRandomSource(seed=42)

    for mode, n in [(Mode.CHARACTER, 2), (Mode.CHARACTER, 3), (Mode.WORD, 1)]:
        model = build_frequency_model(text, group_size=n, mode=mode)
        print(f"{mode.value} n={n}:", model.summary())
        print(model.to_frame().head(5).to_string(index=False))
        try:
            print(generate_text(model, 12, rng, max_steps=10_000))
        except MarkovTextError as e:
            # The walk can reach the corpus' last group, which has no successors.
            print(f"(failed: {e})")
        print()


if __name__ == "__main__":
    main()
