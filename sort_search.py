#Sorting

def is_sorted(a):
    """Return True if a is in non-decreasing order."""
    return all(a[i] <= a[i + 1] for i in range(len(a) - 1))


def selection_sort(a):
    """
    Sort a in place into non-decreasing order. Returns None.

    Each pass selects the minimum of the unsorted suffix a[i:] and
    swaps it into position i.
    - O(n^2) comparisons, O(1) extra space.
    - Empty and single element sequences are left untouched.
    - No ordering guarantee between equal keys (fine for plain ints).
    """
    n = len(a)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if a[j] < a[min_index]:
                min_index = j
        if min_index != i:
            a[i], a[min_index] = a[min_index], a[i]


#Searching

def binary_search_window(a, key, start, end):
    """
    Look for key in a[start:end + 1] (both bounds inclusive).

    Precondition: a is sorted ascending. This is not checked; on an
    unsorted sequence the answer is meaningless but no error is raised.
    """
    while start <= end:
        #start + (end - start) // 2 keeps the midpoint inside the window
        mid = start + (end - start) // 2
        if a[mid] == key:
            return True
        if a[mid] > key:
            end = mid - 1
        else:
            start = mid + 1

    #Window is empty
    return False


def binary_search(a, key):
    """Return True if key is present in the ascending sequence a."""
    return binary_search_window(a, key, 0, len(a) - 1)


__all__ = [
    'selection_sort',
    'binary_search',
    'binary_search_window',
    'is_sorted',
]
