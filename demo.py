#!/usr/bin/env python3
"""
Quick demo of the seam-carve library.
Generates a synthetic scene, then carves it down to 75% of its width.
"""

import numpy as np
from PIL import Image

from seam_carve import (
    GradientEnergyFunction,
    SeamCarver,
    WidthReducer,
    seam_energy,
)


def create_sample_image(path: str = "sample.png") -> str:
    """Create a sample image with flat regions and a few sharp objects."""
    print("Creating sample image...")

    img = np.zeros((300, 400, 3), dtype=np.uint8)

    # Sky and grass
    img[:180, :] = [135, 206, 235]
    img[180:, :] = [34, 139, 34]

    # Sun
    y, x = np.ogrid[:300, :400]
    mask = (x - 320)**2 + (y - 70)**2 <= 35**2
    img[mask] = [255, 215, 0]

    # Tree trunk and leaves
    img[200:280, 90:105] = [101, 67, 33]
    img[130:210, 60:135] = [0, 128, 0]

    # House walls and door
    img[190:270, 200:280] = [255, 255, 255]
    img[230:270, 230:250] = [120, 60, 20]

    Image.fromarray(img).save(path)
    print(f"Sample image saved to: {path}")
    return path


def demo_energy(image_path: str) -> None:
    """Demo the gradient energy map and the first seam."""
    print("\n" + "="*60)
    print("DEMO: Energy and seams")
    print("="*60)

    img = np.array(Image.open(image_path).convert("RGB"))
    carver = SeamCarver(energy_function=GradientEnergyFunction())

    energy = carver.compute_energy(img)
    print(f"  Shape: {energy.shape}")
    print(f"  Min: {energy.min():.3f}, Max: {energy.max():.3f}")
    print(f"  Zero-energy pixels: {(energy == 0).mean():.1%}")

    seam = carver.find_vertical_seam(energy)
    print(f"  First seam cost: {seam_energy(energy, seam):.3f}")

    Image.fromarray(carver.visualize_energy(img)).save("energy.png")
    Image.fromarray(carver.visualize_seams(img, n_seams=50)).save("seams.png")
    print("  Saved: energy.png, seams.png")


def demo_width_reduction(image_path: str) -> None:
    """Demo removing a quarter of the columns."""
    print("\n" + "="*60)
    print("DEMO: Width reduction")
    print("="*60)

    reducer = WidthReducer()
    width = Image.open(image_path).width
    result = reducer.reduce(image_path, width // 4)

    print(f"Original: {result.original_size}")
    print(f"Resized: {result.resized_size}")

    output_path = result.save("resized.png")
    print(f"Saved: {output_path}")


def main():
    """Run all demos."""
    print("="*60)
    print("SEAM CARVE - Demo")
    print("="*60)

    sample_path = create_sample_image()

    demo_energy(sample_path)
    demo_width_reduction(sample_path)

    print("\n" + "="*60)
    print("Demo complete!")
    print("="*60)


if __name__ == "__main__":
    main()
