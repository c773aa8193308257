"""Renderers for blocks, inodes, links, Git status, users, groups, sizes and timestamps."""