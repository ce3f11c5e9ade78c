from typing import Callable, List

import pytest

from gobundle.parser import Node, TreeSitterParser

SAMPLE = '''// Package demo is a sample.
package demo

import "fmt"

import (
	"os"
	str "strings"
)

/* configuration
   values */
var verbose = false
var count int = 3

const greeting = "hello, { world }"

type Config struct {
	Name  string `json:"name"`
	Items []int
}

func (c *Config) Describe() string {
	var prefix = "cfg"
	var sep = ": "
	total := 0
	for _, item := range c.Items {
		total += item
	}
	if total > 10 {
		return prefix + sep + c.Name
	}
	return fmt.Sprintf("%s%s%d", prefix, sep, total) // trailing
}

func main() {
	c := &Config{Name: str.ToUpper("demo"), Items: []int{1, 2, 3}}
	if verbose {
		fmt.Println(c.Describe(), len(os.Args), count)
	}
	fmt.Println(greeting)
}
'''


def _find_all(node: Node, kind: str) -> List[Node]:
    found = [node] if node.kind == kind else []
    for child in node.children:
        found.extend(_find_all(child, kind))
    return found


@pytest.fixture
def parser() -> TreeSitterParser:
    return TreeSitterParser()


@pytest.fixture
def sample_source() -> str:
    return SAMPLE


@pytest.fixture
def find_all() -> Callable[[Node, str], List[Node]]:
    return _find_all
