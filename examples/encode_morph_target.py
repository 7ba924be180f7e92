#!/usr/bin/env python3
"""
Example: Write a quad with a sparse morph target to a GLB file.
"""

import sys

import numpy as np
from pygltflib import (
    GLTF2, Asset, Attributes, Buffer, BufferView, Mesh, Node, Primitive, Scene,
)

import glbaccessor
from glbaccessor.common import get_logger, log_debug_level

logger = get_logger("encode_morph_target")
if "--debug" in sys.argv:
    log_debug_level("encode_morph_target")

positions = np.array([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], dtype=np.float32)
indices = np.array([0, 1, 2, 0, 2, 3], dtype=np.uint16)
# Only the top-right corner moves
deltas = np.zeros_like(positions)
deltas[2] = [0.25, 0.25, 0.5]

blob = bytearray()
buffer_views = []
accessors = glbaccessor.Holder()

pos_accessor = accessors.hold(glbaccessor.AccessorData(glbaccessor.GLT_VEC3F, buffer_view=0))
offset = pos_accessor.append_as_binary_array(positions, blob)
buffer_views.append(BufferView(buffer=0, byteOffset=offset, byteLength=pos_accessor.byte_length, target=34962))
pos_accessor.min = positions.min(axis=0).tolist()
pos_accessor.max = positions.max(axis=0).tolist()

idx_accessor = accessors.hold(glbaccessor.AccessorData(glbaccessor.GLT_USHORT, buffer_view=1))
offset = idx_accessor.append_as_binary_array(indices, blob)
buffer_views.append(BufferView(buffer=0, byteOffset=offset, byteLength=idx_accessor.byte_length, target=34963))

# Keep the next block 4-byte aligned
blob.extend(b'\x00' * glbaccessor.common.padding_for(len(blob)))

morph = accessors.hold(glbaccessor.SparseAccessorData(
    glbaccessor.GLT_UINT, glbaccessor.GLT_VEC3F, idx_buffer_view=2, val_buffer_view=3,
))
idx_offset, val_offset = morph.append_as_binary_array(deltas, blob)
buffer_views.append(BufferView(buffer=0, byteOffset=idx_offset, byteLength=morph.idx_byte_length))
buffer_views.append(BufferView(buffer=0, byteOffset=val_offset, byteLength=morph.val_byte_length))
morph.min = deltas.min(axis=0).tolist()
morph.max = deltas.max(axis=0).tolist()

logger.info(f"Morph target stores {morph.sparse_count} of {morph.count} vertices")

gltf = GLTF2(
    asset=Asset(version="2.0"),
    scene=0,
    scenes=[Scene(nodes=[0])],
    nodes=[Node(mesh=0)],
    meshes=[Mesh(primitives=[Primitive(
        attributes=Attributes(POSITION=pos_accessor.ix),
        indices=idx_accessor.ix,
        targets=[Attributes(POSITION=morph.ix)],
    )], weights=[0.0])],
    accessors=[accessor.to_pygltf() for accessor in accessors],
    bufferViews=buffer_views,
    buffers=[Buffer(byteLength=len(blob))],
)
gltf.set_binary_blob(bytes(blob))
gltf.save("morph_quad.glb")

logger.info(f"Wrote morph_quad.glb ({len(blob)} bytes of binary data)")
