from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    import numpy as np

    from option_payoffs import (
        Asian,
        AsianAveragingType,
        Barrier,
        BarrierType,
        Compound,
        European,
        OptionStyle,
        PayoffInfo,
        discounted_mean,
        payoff,
        payoff_paths,
    )

    info = PayoffInfo(
        spot=112.0,
        strike=100.0,
        style=OptionStyle.CALL,
        spot_prices=[100.0, 104.0, 118.0, 112.0],
        spot_min=100.0,
        spot_max=118.0,
    )

    print("European:", payoff(European(), info))
    print("Asian (geo):", payoff(Asian(AsianAveragingType.GEOMETRIC), info))
    print(
        "Up-and-out @115:",
        payoff(Barrier(BarrierType.UP_AND_OUT, barrier_level=115.0, rebate=1.0), info),
    )
    print("Compound:", payoff(Compound(European()), info))

    # Paths come from elsewhere (a simulator, historical windows, ...)
    rng = np.random.default_rng(0)
    steps = rng.normal(-0.5 * 0.2**2 / 12, 0.2 / np.sqrt(12), size=(10_000, 12))
    paths = 100.0 * np.exp(np.hstack([np.zeros((10_000, 1)), steps.cumsum(axis=1)]))

    px, se = discounted_mean(
        payoff_paths(Asian(), paths, strike=100.0), df=np.exp(-0.03)
    )
    print("Asian MC:", px, "(SE=", se, ")")
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
