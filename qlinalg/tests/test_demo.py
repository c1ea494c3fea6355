import numpy as np
from qlinalg.demo import main, run

def test_demo_prints_and_round_trips(capsys):
    back = run()
    out = capsys.readouterr().out
    assert "vec_real = [1, 2]" in out
    assert "mul_res = [1+2j, 6+8j]" in out
    assert "Canonical basis of R^2: [[1, 0], [0, 1]]" in out
    assert np.allclose(back.scalars.elements, [1.0, 0.0], atol=1e-12, rtol=0)

def test_demo_cli_numba_backend(capsys):
    main(["--backend", "numba"])
    assert "psi round trip" in capsys.readouterr().out
