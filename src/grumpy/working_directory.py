import os


class ChangeWorkingDirectory:
    """Context manager that chdirs into a directory and always changes back.

    Failures to read or change the working directory are not handled here:
    continuing with an unknown working directory is worse than aborting.
    """

    def __init__(self, new_directory):
        self.new_directory = new_directory
        self.previous_directory = None

    def __enter__(self) -> "ChangeWorkingDirectory":
        previous_directory = os.getcwd()
        os.chdir(self.new_directory)
        self.previous_directory = previous_directory
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        previous_directory, self.previous_directory = self.previous_directory, None
        os.chdir(previous_directory)
        return False
