# qlinalg/demo.py
import argparse
import numpy as np
from . import gates as G
from .basis import OrderedOrthonormalBasis
from .superposition import SuperPosition
from .vector import Vec2, Vec3


def run(backend="serial"):
    vec_real = Vec2([1.0, 2.0])
    print(f"vec_real = {vec_real}")

    vec_complex = Vec2([1 + 2j, 3 + 4j])
    print(f"vec_complex = {vec_complex}")

    std_real_0 = Vec2([1.0, 0.0])
    real_45 = Vec2([1.0, 1.0])
    print(f"Real angle: {std_real_0.angle(real_45)}")
    complex_angle = Vec2([1 + 0j, 1 + 0j]).angle(Vec2([0j, 1 + 0j]))
    print(f"Complex angle: {complex_angle}")

    mul_res = vec_real * vec_complex
    print(f"mul_res = {mul_res}")
    print(f"mul_res is zero: {mul_res.is_zero()}")
    print(f"mul_res norm_squared: {mul_res.norm_squared()}")
    print(f"mul_res inner_product(self, self): {mul_res.inner_product(mul_res)}")
    print(f"Complex norm squared: {vec_complex.norm_squared()}")
    print(f"mul_res norm: {mul_res.norm()}")
    print("Canonical basis of R^2: [{}, {}]".format(*Vec2.canonical_basis()))
    print("Canonical basis of C^3: [{}, {}, {}]".format(*Vec3.canonical_basis(np.complex128)))

    hadamard = OrderedOrthonormalBasis(G.H())
    psi = SuperPosition(Vec2([1.0, 0.0]), OrderedOrthonormalBasis.standard(2), backend=backend)
    in_h = psi.to_basis(hadamard, backend=backend)
    back = in_h.to_basis(psi.basis, backend=backend)
    print(f"psi = {psi}")
    print(f"psi in Hadamard basis = {in_h}")
    print(f"psi round trip = {back}")
    return back


def main(argv=None):
    p = argparse.ArgumentParser(description="qlinalg demonstration")
    p.add_argument("--backend", type=str, default="serial", choices=["serial", "numba"])
    args = p.parse_args(argv)
    run(backend=args.backend)


if __name__ == "__main__":
    main()
