import json
import argparse
from pathlib import Path

from gltf_formats.mesh import (
    BlendShape,
    BoneWeight,
    GltfBuffer,
    MeshExportSettings,
    MeshWithRenderer,
    SourceMesh,
    export_mesh,
    get_axis_inverter
)


# ------------------------------------------------------------------------------
def load_mesh(filename):
    with open(filename, 'r') as file:
        data = json.load(file)

    bone_weights = None
    if 'bone_weights' in data:
        bone_weights = [BoneWeight.from_pairs(pairs) if pairs is not None else None for pairs in data['bone_weights']]

    blend_shapes = [BlendShape(shape['name'], shape['positions'], shape.get('normals')) for shape in data.get('blend_shapes', [])]

    mesh = SourceMesh.from_arrays(
        data.get('name', Path(filename).stem),
        [tuple(p) for p in data['positions']],
        [tuple(n) for n in data['normals']] if 'normals' in data else None,
        [tuple(uv) for uv in data['uvs']] if 'uvs' in data else None,
        data['submeshes'],
        bone_weights,
        blend_shapes,
    )
    return mesh, data.get('materials', [])


# ------------------------------------------------------------------------------
def export(args):
    params = {
        'tangents': False,
        'only_blend_shape_position': args.only_positions,
    }

    mesh, material_names = load_mesh(args.input)
    materials = [{'name': name} for name in material_names]
    renderer = MeshWithRenderer(mesh, materials)

    gltf = GltfBuffer()
    buffer_index = gltf.add_buffer()
    descriptor = export_mesh(gltf, buffer_index, renderer, materials, get_axis_inverter(args.axis), MeshExportSettings.from_params(params))

    outputpath = Path(args.output or Path(args.input).with_suffix('.gltf')).resolve()
    binpath = outputpath.with_suffix('.bin')

    document = {
        'asset': {'version': '2.0', 'generator': 'gltf_formats'},
        'scene': 0,
        'scenes': [{'nodes': [0]}],
        'nodes': [{'name': mesh.name, 'mesh': 0}],
        'meshes': [descriptor.to_dict()],
        'materials': materials,
    }
    document.update(gltf.to_dict([binpath.name]))

    with open(binpath, 'wb') as out:
        out.write(gltf.get_bytes(buffer_index))
    with open(outputpath, 'w') as out:
        json.dump(document, out, indent=2)

    print('---- export ---------------------------------------------------------')
    print(F"primitives: {len(descriptor.primitives)}")
    print(F"accessors: {len(gltf.accessors)}")
    print(F"dropped triangles: {len(descriptor.diagnostics)}")
    print(outputpath)


# ------------------------------------------------------------------------------
if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Exports a json mesh description as a gltf file with one primitive per submesh')
    parser.add_argument('-i', '--input', metavar='mesh.json', required=True, type=str, help='The mesh to export...')
    parser.add_argument('-o', '--output', metavar='mesh.gltf', required=False, type=str, help='Output file...')
    parser.add_argument('--axis', choices=['z', 'x', 'none'], default='z', help='Axis to mirror for the handedness conversion')
    parser.add_argument('--only-positions', action='store_true', help='Export only position deltas for blend shapes')
    args = parser.parse_args()
    export(args)
