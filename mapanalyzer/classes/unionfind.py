# -*- coding: utf8 -*-

"""
UnionFind class definition over a dense integer index space, used by the
kruskal based barely connected map builder.

Supplemental PriorityQueue class is also defined in here
"""

import heapq
import numpy as np


class UnionFind(object):

    def __init__(self, size):
        """
        Creates a UnionFind structure of ``size`` singleton sets

        Args:
            size (int):  number of elements, indexed 0..size-1

        Notes:
            Union-find data structure also known as a Disjoint-set data
            structure

            Sets are merged by rank; path compression is done iteratively
            so that deep parent chains never hit the recursion limit.
        """
        self.parents = np.arange(size)
        self.ranks = np.zeros(size, dtype=int)

    def __len__(self):
        return len(self.parents)

    def find(self, p):
        """
        Find and return the root of the set containing p

        Every node on the path from p to the root is re-pointed
        directly to the root.
        """
        # find path of objects leading to the root
        path = [p]
        root = self.parents[p]
        while root != path[-1]:
            path.append(root)
            root = self.parents[root]

        # compress the path and return
        for ancestor in path:
            self.parents[ancestor] = root

        return int(root)

    __getitem__ = find

    def union(self, p, q):
        """
        Merge the sets containing p and q

        The root with the strictly smaller rank goes under the other one.
        On a rank tie q's root is attached under p's root.

        Args:
            p (int): member of one of the disjoint sets
            q (int): member of one of the disjoint sets
        """
        root_p = self.find(p)
        root_q = self.find(q)

        if root_p == root_q:
            return

        if self.ranks[root_p] < self.ranks[root_q]:
            self.parents[root_p] = root_q
        elif self.ranks[root_p] > self.ranks[root_q]:
            self.parents[root_q] = root_p
        else:
            self.parents[root_q] = root_p
            self.ranks[root_p] += 1

    def connected(self, p, q):
        """Whether p and q are in the same set"""
        return self.find(p) == self.find(q)

    def component_count(self):
        """Return the number of disjoint sets"""
        return len(set(self.find(i) for i in range(len(self))))


class PriorityQueue(object):

    def __init__(self):
        """
        Queue implementing highest-priority-in first-out.

        Note:
        Priority is cost based, therefore smaller values are prioritized
        over larger values.  Items of equal priority come out in the
        order they were pushed.
        """
        self._queue = []
        self._index = 0

    def __len__(self):
        return len(self._queue)

    def push(self, item, priority):
        """
        Push an item into the queue.

        Args:
            item     (obj): Item to be stored in the queue
            priority (obj): Priority in which item will be retrieved from the
                queue (any comparable value, e.g. a tuple)
        """
        heapq.heappush(self._queue, (priority, self._index, item))
        self._index += 1

    def pop(self):
        """
        Removes the highest priority item from the queue

        Returns:
            obj: item with highest priority
        """
        return heapq.heappop(self._queue)[-1]
