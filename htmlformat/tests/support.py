import codecs
import glob
import os

test_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "testdata")


def get_data_files(files="*.dat"):
    return sorted(glob.glob(os.path.join(test_dir, files)))


class TestData(object):
    """Reads test cases from a .dat file.

    A file holds a series of tests. Each test is a set of sections, every
    section starting with a "#name" heading line and running to the next
    heading. A new test starts at each newTestHeading section and tests
    are separated by one blank line. The newline ending the last line of a
    section is not part of its value.
    """

    def __init__(self, filename, newTestHeading="data", encoding="utf8"):
        self.filename = filename
        self.encoding = encoding
        self.newTestHeading = newTestHeading

    def __iter__(self):
        with codecs.open(self.filename, encoding=self.encoding) as f:
            data = {}
            key = None
            for line in f:
                heading = self.isSectionHeading(line)
                if heading:
                    if data and heading == self.newTestHeading:
                        # Remove the blank line separating tests
                        data[key] = data[key][:-1]
                        yield self.normaliseOutput(data)
                        data = {}
                    key = heading
                    data[key] = ""
                elif key is not None:
                    data[key] += line
            if data:
                yield self.normaliseOutput(data)

    def isSectionHeading(self, line):
        """If the current heading is a test section heading return the heading,
        otherwise return False"""
        if line.startswith("#"):
            return line[1:].strip()
        else:
            return False

    def normaliseOutput(self, data):
        # Remove trailing newlines
        for key, value in data.items():
            if value.endswith("\n"):
                data[key] = value[:-1]
        return data


def load_tests(files):
    """All tests of the data files matching files, as (name, test) pairs."""
    tests = []
    for filename in get_data_files(files):
        name = os.path.splitext(os.path.basename(filename))[0]
        for index, test in enumerate(TestData(filename)):
            tests.append(("%s-%d" % (name, index), test))
    return tests


def errorMessage(input, expected, actual):
    msg = ("Input:\n%s\nExpected:\n%s\nRecieved\n%s\n" %
           (repr(input), repr(expected), repr(actual)))
    return msg
