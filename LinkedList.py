import logging
import numpy as np


LOGGER_NAME = "LINKED_LIST"


def ConfigureLogger(logFile=None,logLevel=logging.WARNING,logger:logging.Logger=None):
    """
    Configure the logger used by linked lists.

    Args:
        logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
        logLevel (int, optional): Logging level (e.g., logging.DEBUG). Defaults to logging.WARNING.
        logger (logging.Logger, optional): Custom logger instance. If None, the "LINKED_LIST" logger is used. Defaults to None.

    Returns:
        logging.Logger: The configured logger.
    """
    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logLevel)

    if logFile is not None:
        file_handler = logging.FileHandler(logFile)
        file_handler.setLevel(logLevel)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(formatter)

        logger.addHandler(file_handler)

    return logger


class LinkedListError(Exception):
    """Base exception for failed linked list lookups."""

    pass


class EmptyListError(LinkedListError):
    """Exception raised when reading from a list with no nodes."""

    pass


class InvalidPositionError(LinkedListError, IndexError):
    """Exception raised when a position lies outside of the list."""

    pass


class LinkedListNode:
    """
    A node in a singly-linked list structure.

    Attributes:
        value: The data stored in this node.
        nextNode (LinkedListNode): Reference to the next node in the list, or None for the last node.
    """
    def __init__(self,value):
        self.value = value

        self.nextNode = None


class LinkedList:
    """
    A singly-linked list with O(1) insertion at both ends.

    The list owns its chain of nodes through headNode. tailNode is an alias of
    the last node in that chain and is only used to make append O(1).

    Instances are not safe for concurrent mutation. Callers sharing a list
    between threads must synchronize externally.

    Attributes:
        size (int): Number of elements in the list.
        headNode (LinkedListNode): First node in the list.
        tailNode (LinkedListNode): Last node in the list.
        logger (logging.Logger): Logger used for diagnostic messages.
    """
    def __init__(self,arr=[],logger:logging.Logger=None):
        """
        Initialize a new linked list.

        Args:
            arr (iterable, optional): Initial elements to populate the list. Defaults to [].
            logger (logging.Logger, optional): Custom logger instance. If None, the "LINKED_LIST" logger is used. Defaults to None.
        """
        self.size = 0
        self.headNode = None
        self.tailNode = None

        if logger is None:
            logger = logging.getLogger(LOGGER_NAME)
        self.logger = logger

        for e in arr:
            self.append(e)

    def _reset(self):
        self.size = 0
        self.headNode = None
        self.tailNode = None

    def _values(self):
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def append(self,newVal):
        """
        Add a new element to the end of the list.

        Args:
            newVal: The value to append to the list.
        """
        newNode = LinkedListNode(newVal)

        if self.headNode is None:
            self.headNode = newNode
            self.tailNode = newNode
        else:
            self.tailNode.nextNode = newNode
            self.tailNode = newNode

        self.size += 1

    def prepend(self,newVal):
        """
        Add a new element to the beginning of the list.

        Args:
            newVal: The value to prepend to the list.
        """
        newNode = LinkedListNode(newVal)

        if self.headNode is None:
            self.headNode = newNode
            self.tailNode = newNode
        else:
            newNode.nextNode = self.headNode
            self.headNode = newNode

        self.size += 1

    def insertAt(self,newVal,position:int):
        """
        Insert a new element so that it ends up at the given position.

        Position 0 is the head of the list and position len(self) is just past
        the tail. Any other position is ignored without raising, and the list
        is left untouched.

        Args:
            newVal: The value to insert.
            position (int): Zero-based index the new element will occupy.
        """
        if position < 0:
            self.logger.debug("Ignoring insert at negative position %s", position)
            return
        if position == 0:
            self.prepend(newVal)
            return

        #Walk to the node that will precede the new one.
        nodei = self.headNode
        while nodei is not None and position > 1:
            nodei = nodei.nextNode
            position -= 1

        if nodei is None:
            self.logger.debug("Ignoring insert past the end of a list of size %s", self.size)
            return

        newNode = LinkedListNode(newVal)
        newNode.nextNode = nodei.nextNode
        nodei.nextNode = newNode

        if self.tailNode is nodei:
            self.tailNode = newNode

        self.size += 1

    def remove(self,value):
        """
        Remove the first element equal to the given value.

        Nothing happens if no element matches.

        Args:
            value: The value to remove.
        """
        prevNode = None
        nodei = self.headNode
        while nodei is not None:
            if nodei.value == value:
                break
            prevNode = nodei
            nodei = nodei.nextNode
        else:
            self.logger.debug("Value %s not found, nothing removed", value)
            return

        if prevNode is None:
            self.headNode = nodei.nextNode
        else:
            prevNode.nextNode = nodei.nextNode

        if self.tailNode is nodei:
            self.tailNode = prevNode

        nodei.nextNode = None
        self.size -= 1

    def extend(self,otherList):
        """
        Extend this list by splicing the nodes of another LinkedList onto its end.

        The nodes are moved, not copied: afterwards otherList is empty and this
        list owns its former chain.

        Args:
            otherList (LinkedList): The linked list to append to this list.

        Raises:
            AssertionError: If otherList is not a LinkedList instance.
        """
        assert isinstance(otherList,LinkedList), f"Error! \"extend\" can only be used for other linked lists, not \"{type(otherList)}\""
        if otherList is self or otherList.headNode is None:
            return

        if self.headNode is None:
            self.headNode = otherList.headNode
        else:
            self.tailNode.nextNode = otherList.headNode

        self.tailNode = otherList.tailNode
        self.size += otherList.size

        otherList._reset()

    def search(self,value) -> int:
        """
        Find the position of the first element equal to the given value.

        Args:
            value: The value to look for.

        Returns:
            int: The zero-based position of the first match, or -1 if there is none.
        """
        for position,vali in enumerate(self._values()):
            if vali == value:
                return position
        return -1

    def get(self,position:int):
        """
        Return the element stored at the given position.

        Args:
            position (int): Zero-based index of the element.

        Returns:
            The value at that position.

        Raises:
            EmptyListError: If the list has no elements.
            InvalidPositionError: If position is negative or not smaller than the list size.
        """
        if self.headNode is None:
            raise EmptyListError("The list is empty")
        if position < 0:
            raise InvalidPositionError(f"Invalid position: {position}")

        nodei = self.headNode
        steps = position
        while nodei is not None and steps > 0:
            nodei = nodei.nextNode
            steps -= 1

        if nodei is None:
            raise InvalidPositionError(f"Invalid position: {position}")
        return nodei.value

    def countNodes(self) -> int:
        """
        Count the nodes by walking the chain from the head.

        This is O(n). The result always matches size, which is what len() reports.
        """
        count = 0
        nodei = self.headNode
        while nodei is not None:
            count += 1
            nodei = nodei.nextNode
        return count

    def isEmpty(self) -> bool:
        return self.headNode is None

    def ToString(self) -> str:
        """
        Render the list as its values separated by spaces inside brackets, e.g. "[1 2 3]".

        Returns:
            str: The rendered list. "[]" for an empty list.
        """
        return "[" + " ".join(str(v) for v in self._values()) + "]"

    def ToArray(self,dtype=None) -> np.ndarray:
        """
        Copy the values of the list into a one-dimensional numpy array.

        Args:
            dtype (optional): Data type of the returned array. If None, numpy infers it. Defaults to None.

        Returns:
            np.ndarray: The values in list order.
        """
        return np.array(list(self._values()),dtype=dtype)

    @staticmethod
    def Concatenate(list1,list2):
        """
        Join two lists by linking the tail of the first to the head of the second.

        This consumes both arguments. The returned list owns every node, and the
        argument that is not returned is left empty. If list1 is empty, list2 is
        returned. Otherwise list1 is returned.

        Args:
            list1 (LinkedList): The list that will come first.
            list2 (LinkedList): The list that will come second.

        Returns:
            LinkedList: The merged list (list1 or list2 itself, not a copy).

        Raises:
            AssertionError: If either argument is not a LinkedList instance.
        """
        assert isinstance(list1,LinkedList), f"Error! \"Concatenate\" can only be used for linked lists, not \"{type(list1)}\""
        assert isinstance(list2,LinkedList), f"Error! \"Concatenate\" can only be used for linked lists, not \"{type(list2)}\""

        if list1.headNode is None:
            return list2
        if list2.headNode is None:
            return list1

        list1.logger.debug("Splicing %s nodes onto a list of %s nodes", list2.size, list1.size)
        list1.extend(list2)
        return list1

    @staticmethod
    def Interleave(list1,list2):
        """
        Build a new list by alternately taking one value from each list.

        Once either list runs out, the rest of the other one is appended in
        order. The values are copied into new nodes, so both arguments remain
        intact.

        Args:
            list1 (LinkedList): The list providing the first, third, ... values.
            list2 (LinkedList): The list providing the second, fourth, ... values.

        Returns:
            LinkedList: A new list, or None if either argument is None.
        """
        if list1 is None or list2 is None:
            logging.getLogger(LOGGER_NAME).warning("Cannot interleave a missing list")
            return None

        result = LinkedList(logger=list1.logger)
        node1 = list1.headNode
        node2 = list2.headNode

        while node1 is not None and node2 is not None:
            result.append(node1.value)
            result.append(node2.value)
            node1 = node1.nextNode
            node2 = node2.nextNode

        #At most one of these still has nodes left.
        for nodei in (node1,node2):
            while nodei is not None:
                result.append(nodei.value)
                nodei = nodei.nextNode

        return result

    def __getitem__(self,position:int):
        return self.get(position)

    def __contains__(self,value):
        return self.search(value) != -1

    def __eq__(self,other):
        if not isinstance(other,LinkedList):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(a == b for a,b in zip(self._values(),other._values()))

    def __len__(self):
        """
        Return the number of elements in the list.

        Returns:
            int: The size of the linked list.
        """
        return self.size

    def __str__(self):
        return self.ToString()

    def __repr__(self):
        return f"LinkedList({self.ToString()})"
